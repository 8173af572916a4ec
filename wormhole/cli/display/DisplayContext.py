"""Holder of the display used by the CLI runner."""

from .CLIDisplay import CLIDisplay
from .Display import Display

OUTPUT_FORMATS = ("json", "yaml")


class DisplayContext:
    """Hands out the display and output format for a command run.

    A fresh CLIDisplay is created per run so it binds the current stdout and
    stderr; tests may install their own display with set_display. The output
    format is set by the global ``--display`` option before any command runs.
    """

    def __init__(self) -> None:
        self._display: Display | None = None
        self.output_format = "yaml"

    def get_display(self) -> Display:
        if self._display is not None:
            return self._display
        return CLIDisplay()

    def set_display(self, display: Display | None) -> None:
        self._display = display

    def set_output_format(self, output_format: str) -> None:
        """Choose "json" or "yaml" for command output documents.

        Raises:
            ValueError: If the format is neither
        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"--display must be 'json' or 'yaml', got '{output_format}'")
        self.output_format = output_format
