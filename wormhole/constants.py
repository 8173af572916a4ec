"""Shared constants for Wormhole dot-directories and artefact locations."""

WORMHOLE_HOME_EXT = ".wormhole"  # user-level state/config directory suffix

# Name of the environment variable that overrides the home directory
WORMHOLE_HOME_ENV = "WORMHOLE_HOME"

# Logfile name under the home directory
LOG_FILENAME = "wormhole.log"
