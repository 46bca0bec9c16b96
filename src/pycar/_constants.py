"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# Subsystem limits
# ------------------------------------------------------------------

MAX_BRAKE_FORCE = 100
MAX_TURN_ANGLE = 45  # degrees either side of straight ahead

# ------------------------------------------------------------------
# Console output
# ------------------------------------------------------------------

CONSOLE_LOGGER_NAME = "pycar.console"
CONSOLE_FORMAT = "Log: %(message)s"
