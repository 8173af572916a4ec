"""Unit tests for wormhole.api.validate_output and the output schema registry."""

import pytest

from wormhole.api._output_schemas import BaseOutputSchema, get_output_schema, register_output_schema
from wormhole.api._output_schemas.wormhole import WormholeLocateOutput
from wormhole.api.StageResult import StageResult
from wormhole.api.validate_output import validate_output
from wormhole.api.wormhole.cmd_locate import cmd_locate


def test_link_commands_registered_under_wormhole_domain():
    assert get_output_schema("wormhole", "locate") is WormholeLocateOutput
    for command in ("create", "restore", "reparent", "check"):
        assert get_output_schema("wormhole", command) is not None
    for command in ("new", "add", "show"):
        assert get_output_schema("map", command) is not None
    assert get_output_schema("config", "show") is not None


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError, match="already registered"):
        register_output_schema("wormhole", "locate", WormholeLocateOutput)


def test_fills_defaults():
    output = validate_output(
        cmd_locate,
        {"source_map": "A.map", "hint": "B.map", "node_uri": "urn:x", "found": False, "strategy": None, "path": None},
    )
    assert output["errors"] == []
    assert output["warnings"] == []


def test_missing_field_rejected():
    with pytest.raises(ValueError, match="Output validation failed for wormhole.locate"):
        validate_output(cmd_locate, {"source_map": "A.map"})


def test_non_api_function_passes_through():
    def helper():
        return None

    output = {"anything": 1}
    assert validate_output(helper, output) is output


def test_base_schema_defaults():
    schema = BaseOutputSchema()
    assert schema.errors == []
    assert schema.warnings == []


def test_stage_result_defaults():
    result = StageResult(announce="Working...", progress_callback=lambda _: iter(()))
    assert result.result == ""
    assert result.output == {}
    assert result.success is False


def test_unknown_output_key_rejected():
    with pytest.raises(ValueError, match="Output validation failed for wormhole.locate"):
        validate_output(
            cmd_locate,
            {
                "source_map": "A.map",
                "hint": "B.map",
                "node_uri": "urn:x",
                "found": False,
                "strategy": None,
                "path": None,
                "paht": None,
            },
        )


def test_stage_result_finish_and_fail():
    result = StageResult(announce="Working...", progress_callback=lambda _: iter(()))
    result.finish("done", {"errors": []})
    assert result.success
    assert result.result == "done"

    output = {"errors": [], "warnings": []}
    result.fail("broken", output, "no map")
    assert not result.success
    assert result.result == "broken"
    assert result.output["errors"] == ["no map"]
