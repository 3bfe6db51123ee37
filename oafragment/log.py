import logging.config
import os

handlers = None


def init():
    """
    configure the oafragment loggers once, called when decoding

    export OAFRAGMENT_LOGGING_HANDLERS=console,debug to log to stderr and /tmp/oafragment-debug.log
    """
    global handlers

    if handlers is not None:
        return

    handlers = [i for i in os.environ.get("OAFRAGMENT_LOGGING_HANDLERS", "").split(",") if i]
    if not handlers:
        return

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"class": "logging.Formatter", "format": "%(name)s %(levelname)s %(message)s"},
            "detailed": {"class": "logging.Formatter", "format": "%(asctime)s %(name)s %(levelname)s %(message)s"},
        },
        "handlers": {
            "console": {"class": "logging.StreamHandler", "level": "DEBUG", "formatter": "plain"},
            "debug": {
                "class": "logging.handlers.WatchedFileHandler",
                "level": "DEBUG",
                "formatter": "detailed",
                "filename": "/tmp/oafragment-debug.log",
            },
        },
        "loggers": {
            "oafragment": {"level": "DEBUG", "handlers": handlers},
        },
    }

    unknown = set(handlers) - set(config["handlers"])
    if unknown:
        raise ValueError(f"OAFRAGMENT_LOGGING_HANDLERS {sorted(unknown)} not in {sorted(config['handlers'])}")

    for i in set(config["handlers"]) - set(handlers):
        del config["handlers"][i]

    logging.config.dictConfig(config)


def reset():
    """
    allow :func:`init` to configure again
    """
    global handlers
    handlers = None
