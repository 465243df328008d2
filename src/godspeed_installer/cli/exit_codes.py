"""Process exit codes."""

EXIT_SUCCESS = 0
EXIT_BOOTSTRAP_FAILURE = 1
EXIT_INVALID_USAGE = 2
EXIT_INTERRUPTED = 130
