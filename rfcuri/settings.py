import logging
from configparser import ConfigParser
from pathlib import Path

ini_file_path = str((Path(__file__).parent / "settings.ini").absolute())

parser = ConfigParser()
parser.read(ini_file_path)

LOGGER_TRACE = 5
logging.addLevelName(LOGGER_TRACE, "TRACE")

log_level_mapper = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "trace": LOGGER_TRACE,
}

# "$field" in the ini format stands for "%(field)s"
log_format_fields = ("asctime", "levelname", "name", "module", "funcName", "lineno", "message")

LOGGER_NAME = parser.get("Logging", "logger_name", fallback="rfcuri")
MAIN_LOGGER_LEVEL = parser.get("Logging", "logger_level", fallback="warning")
STREAM_HANDLER_LEVEL = parser.get("Logging", "stream_handler_level", fallback="warning")

# Domain hosts are also checked against the DNS label/name length limits
CHECK_DNS_LENGTHS = parser.getboolean("Host", "check_dns_lengths", fallback=True)

for level in (MAIN_LOGGER_LEVEL, STREAM_HANDLER_LEVEL):
    if level not in log_level_mapper:
        raise ValueError(f"settings.ini contains invalid logger level {level!r}")

MAIN_LOGGER_LEVEL = log_level_mapper[MAIN_LOGGER_LEVEL]  # type: ignore
STREAM_HANDLER_LEVEL = log_level_mapper[STREAM_HANDLER_LEVEL]  # type: ignore

FORMAT = parser.get("Logging", "stream_handler_format", fallback="$levelname | $message")
for field in log_format_fields:
    FORMAT = FORMAT.replace(f"${field}", f"%({field})s")


def _trace(message, *args, **kwargs):
    self = logging.getLogger(LOGGER_NAME)

    if self.isEnabledFor(LOGGER_TRACE):
        self._log(LOGGER_TRACE, message, args, **kwargs)


def configure_logger() -> logging.Logger:
    logger = logging.getLogger(LOGGER_NAME)
    logger.trace = _trace  # type: ignore
    logger.propagate = False
    logger.setLevel(MAIN_LOGGER_LEVEL)

    handler = logging.StreamHandler()
    handler.setLevel(STREAM_HANDLER_LEVEL)
    handler.setFormatter(logging.Formatter(FORMAT))
    logger.addHandler(handler)
    return logger


main_logger = configure_logger()
