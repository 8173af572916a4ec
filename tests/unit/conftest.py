"""Unit test fixtures.

Most helpers are in tests/conftest.py; re-exported here for convenience.
"""

from tests.conftest import build_wormhole, make_map, run_cmd

__all__ = ["build_wormhole", "make_map", "run_cmd"]
