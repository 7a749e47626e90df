import copy
import logging.config
from pathlib import Path

LOGGER_NAME = "json_field_builder"

LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s [%(levelname)s] [%(name)s] - %(message)s"
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": logging.INFO,
            "formatter": "default",
            "stream": "ext://sys.stdout",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": logging.DEBUG,
            "formatter": "default",
            "filename": "data/json_field_builder.log",
            "maxBytes": 5 * 1024 * 1024,  # 5MB
            "backupCount": 10,
        },
    },
    "loggers": {
        LOGGER_NAME: {
            "handlers": ["console", "file"],
            "level": logging.DEBUG,
            "propagate": True,
        }
    },
}


def setup(logfile=None, level=None):
    config = copy.deepcopy(LOGGING_CONFIG)
    if logfile:
        config["handlers"]["file"]["filename"] = str(logfile)
    if level:
        config["handlers"]["console"]["level"] = level

    p = Path(config["handlers"]["file"]["filename"]).expanduser().resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    config["handlers"]["file"]["filename"] = str(p)

    logging.config.dictConfig(config)
    logger.debug("Logging configured, writing to %s", p)


logger = logging.getLogger(LOGGER_NAME)
