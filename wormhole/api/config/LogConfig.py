"""Log section of the configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARN", "ERROR"]


class LogConfig(BaseModel):
    """Threshold for records written to ``wormhole.log`` in the home directory."""

    model_config = ConfigDict(extra="forbid")

    level: LogLevel = "INFO"
