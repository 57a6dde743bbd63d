import logging
import os
import typing

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname) - 8s %(name)s:%(lineno)d %(message)s"
DEFAULT_LOG_FILENAME = "logs/debug.log"
DEFAULT_LOG_LEVEL = "DEBUG"
DEFAULT_LOG_LIBRARIES_LIST = ["asyncio", "pymongo", "motor"]
DEFAULT_LOG_LIBRARIES_LEVEL = "WARN"


def configure_logging(
    log_level: str = DEFAULT_LOG_LEVEL,
    log_format: str = DEFAULT_LOG_FORMAT,
    console: bool = True,
    file: bool = False,
    filename: str = DEFAULT_LOG_FILENAME,
    lib_list: typing.List = DEFAULT_LOG_LIBRARIES_LIST,
    lib_level: str = DEFAULT_LOG_LIBRARIES_LEVEL,
) -> None:
    """Set up root logging for the service.

    Records go to the console and, when `file` is set, to `filename` as well.
    Loggers named in `lib_list` (the Mongo driver, asyncio) get their own
    `lib_level` so a DEBUG service log stays readable.
    """
    log_level = log_level.upper()
    lib_level = lib_level.upper()

    # Clear existing handlers to prevent duplicates on reload
    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.handlers.clear()

    root_logger.setLevel(log_level)
    formatter = logging.Formatter(log_format)

    if console:
        _configure_handler(root_logger, logging.StreamHandler(), log_level, formatter)
    if file:
        os.makedirs(os.path.dirname(filename), exist_ok=True)
        _configure_handler(root_logger, logging.FileHandler(filename), log_level, formatter)

    for lib_name in lib_list:
        logging.getLogger(lib_name).setLevel(lib_level)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        logging.getLogger(logger_name).setLevel(log_level)


def _configure_handler(
    root_logger: logging.Logger,
    handler: logging.Handler,
    log_level: str,
    formatter: logging.Formatter,
) -> None:
    handler.setLevel(log_level)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
