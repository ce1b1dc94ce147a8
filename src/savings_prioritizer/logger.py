import logging
import logging.config
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILENAME = "app.log"


class ColourizedFormatter(logging.Formatter):
    """
    Colours the level name of console records.

    Set NO_COLOR to any value to get plain output.
    """
    GREY = "\x1b[90m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def __init__(self, *args, use_colors: bool | None = None, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.use_colors = "NO_COLOR" not in os.environ if use_colors is None else use_colors

    def format(self, record: logging.LogRecord) -> str:
        if not self.use_colors or record.levelno not in self.LEVEL_COLORS:
            return super().format(record)

        orig_levelname = record.levelname
        record.levelname = f"{self.LEVEL_COLORS[record.levelno]}{record.levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = orig_levelname


def get_logging_config() -> dict:
    log_level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    log_dir = os.getenv("LOG_DIR")
    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "stream": "ext://sys.stdout",
            "formatter": "colour",
        },
    }
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": os.path.join(log_dir, LOG_FILENAME),
            "formatter": "plain",
        }
    root_handlers = list(handlers)

    loggers: dict[str, dict] = {
        "": {
            "handlers": root_handlers,
            "level": log_level_name,
        },
    }
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
        loggers[name] = {"handlers": root_handlers, "level": "INFO", "propagate": False}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "colour": {
                "()": "savings_prioritizer.logger.ColourizedFormatter",
                "fmt": LOG_FORMAT,
            },
            "plain": {
                "format": LOG_FORMAT,
            },
        },
        "handlers": handlers,
        "loggers": loggers,
    }


def setup_logging() -> None:
    logging.config.dictConfig(get_logging_config())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
