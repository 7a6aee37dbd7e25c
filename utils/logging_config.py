import logging
import logging.config
import os


def setup_logging(log_level=logging.INFO, log_file=None):
    """
    Configures logging for the application.

    Logs go to stderr so they never mix with the report lines printed to
    stdout. When ``log_file`` is given a rotating file handler is added.
    """
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": log_level,
            "stream": "ext://sys.stderr",
        },
    }
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "default",
            "level": log_level,
            "filename": log_file,
            "maxBytes": 1024 * 1024,
            "backupCount": 3,
            "encoding": "utf8",
        }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": handlers,
        "root": {
            "handlers": list(handlers),
            "level": log_level,
        },
    }

    logging.config.dictConfig(logging_config)
    logging.getLogger(__name__).debug("Logging configured at level %s", logging.getLevelName(log_level))
