"""
Exit codes for gutimer.

A session that ends by quit key, natural completion or Ctrl-D exits 0.
Everything else maps to one of the codes below.
"""

# Success
SUCCESS = 0

# Reading from the input stream failed (read error or unexpected end-of-file)
ERROR_INPUT = 1

# Invalid arguments or validation error (mode flags, duration, config file)
ERROR_INVALID_ARGS = 2

# The terminal could not be switched into cbreak mode
ERROR_TERMINAL = 3

# Interrupted by SIGINT (128 + signal number)
INTERRUPTED = 130


def get_exit_code_name(code: int) -> str:
    """Get the name of an exit code for display purposes."""
    code_names = {
        SUCCESS: "SUCCESS",
        ERROR_INPUT: "ERROR_INPUT",
        ERROR_INVALID_ARGS: "ERROR_INVALID_ARGS",
        ERROR_TERMINAL: "ERROR_TERMINAL",
        INTERRUPTED: "INTERRUPTED",
    }
    return code_names.get(code, f"UNKNOWN({code})")


def get_exit_code_description(code: int) -> str:
    """Get a human-readable description of an exit code."""
    descriptions = {
        SUCCESS: "Session ended normally",
        ERROR_INPUT: "Error reading from standard input",
        ERROR_INVALID_ARGS: "Invalid arguments or validation error",
        ERROR_TERMINAL: "Unable to set cbreak mode in terminal",
        INTERRUPTED: "Interrupted by user",
    }
    return descriptions.get(code, "Unknown error")
