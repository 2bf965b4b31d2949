# ABOUTME: Exception types raised while setting up the CLI logging sink
# ABOUTME: Runtime output failures are swallowed by the sink and never surface here


class LoggingError(RuntimeError):
    """Base exception for logging setup errors."""

    pass


class AlreadyInstalledError(LoggingError):
    """Raised when the CLI sink is installed a second time in the same process."""

    def __init__(self, level: object | None = None):
        message = "CLI logger is already installed"
        if level is not None:
            message = f"{message} (verbosity {level})"
        super().__init__(message)
        self.level = level
