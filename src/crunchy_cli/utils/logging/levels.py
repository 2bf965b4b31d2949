# ABOUTME: Ordered verbosity scale shared by the sink, the producer helpers and the CLI
# ABOUTME: Maps each verbosity onto the loguru level used to filter records

from enum import IntEnum


class Verbosity(IntEnum):
    """Verbosity levels, ordered from quietest to loudest.

    A record is shown when its own verbosity is at or below the configured
    one, so ``Verbosity.INFO`` shows errors, warnings and infos.
    """

    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @property
    def loguru_level(self) -> str:
        """Name of the matching loguru level."""
        return _LOGURU_LEVELS[self][0]

    @property
    def loguru_no(self) -> int:
        """Numeric severity of the matching loguru level."""
        return _LOGURU_LEVELS[self][1]

    @property
    def is_verbose(self) -> bool:
        """Whether this verbosity switches the sink to extended output."""
        return self >= Verbosity.DEBUG

    @classmethod
    def parse(cls, value: "str | Verbosity") -> "Verbosity":
        """Parse a level name such as ``"debug"`` or ``"WARNING"``.

        Raises:
            ValueError: If the name is not a known level
        """
        if isinstance(value, Verbosity):
            return value
        name = value.strip().upper()
        if name == "WARNING":
            name = "WARN"
        try:
            return cls[name]
        except KeyError:
            valid = ", ".join(level.name for level in cls)
            raise ValueError(f"Unknown log level {value!r} (expected one of {valid})") from None

    @classmethod
    def from_loguru_no(cls, no: int) -> "Verbosity":
        """Classify a loguru level number onto this scale.

        SUCCESS counts as INFO and CRITICAL as ERROR.
        """
        if no <= 5:
            return cls.TRACE
        if no <= 10:
            return cls.DEBUG
        if no < 30:
            return cls.INFO
        if no < 40:
            return cls.WARN
        return cls.ERROR


_LOGURU_LEVELS = {
    Verbosity.ERROR: ("ERROR", 40),
    Verbosity.WARN: ("WARNING", 30),
    Verbosity.INFO: ("INFO", 20),
    Verbosity.DEBUG: ("DEBUG", 10),
    Verbosity.TRACE: ("TRACE", 5),
}
