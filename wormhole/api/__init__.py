"""API module for Wormhole.

Functions defined here serve as the single source of truth for the CLI:
each ``cmd_*`` function returns a StageResult that the CLI runner displays.
"""

__all__: list[str] = []
