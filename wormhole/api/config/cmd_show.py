"""Show configuration command.

CLI: wormhole config show [section]
"""

from collections.abc import Iterator

from ..StageResult import StageResult
from .WormholeConfig import WormholeConfig


def cmd_show(section: str = "") -> StageResult:
    """Show one configuration section, or name all of them when section is empty."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        config_path = str(WormholeConfig.get_config_path())
        output = {"errors": [], "warnings": [], "section": section, "content": {}, "config_path": config_path}

        yield (0.3, "Loading configuration...")
        try:
            sections = WormholeConfig.load().to_dict()
        except ValueError as e:
            yield (1.0, "Complete")
            result_obj.fail("Configuration is invalid", output, str(e))
            return

        yield (1.0, "Complete")
        if not section:
            output["content"] = {"sections": list(sections)}
            result_obj.finish(f"Found {len(sections)} section(s)", output)
        elif section in sections:
            output["content"] = sections[section]
            result_obj.finish(f"Retrieved configuration for '{section}'", output)
        else:
            result_obj.fail(f"Section '{section}' not found", output, f"Unknown section: {section}")

    announce = f"Showing configuration for section '{section}'..." if section else "Listing configuration sections..."
    return StageResult(announce=announce, progress_callback=do_work)
