import logging
from logging import config

from dexdb.config.envs import envs

LOG_FORMAT = "%(asctime)s - %(name)s [%(levelname)s] - %(message)s"


class AddAttrsFilter(logging.Filter):
    """
    A logging filter that adds extra attributes to log records.
    """

    def __init__(self, attrs: dict):
        super().__init__()
        self.attrs = attrs

    def filter(self, record):
        for key, value in self.attrs.items():
            setattr(record, key, value)
        return True


def logstash_logging_config(level: str) -> dict:
    return dict(
        disable_existing_loggers=False,
        version=1,
        formatters={
            "simple": {
                "format": (
                    "%(asctime)s"
                    " - %(filename)s:%(lineno)s:%(funcName)s"
                    " - %(levelname)s"
                    " - %(message)s"
                )
            },
            "logstash": {"()": "logstash_formatter.LogstashFormatterV1"},
        },
        handlers={
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG",
                "formatter": "simple",
                "stream": "ext://sys.stdout",
            },
            "logstash": {
                "level": envs.LOGSTASH_LOGGING_LEVEL,
                "class": "logstash_async.handler.AsynchronousLogstashHandler",
                "transport": "logstash_async.transport.TcpTransport",
                "formatter": "logstash",
                "host": envs.LOGSTASH_HOST,
                "port": envs.LOGSTASH_PORT,
                "database_path": None,
                "event_ttl": 30,  # sec
                "filters": ["add_attrs"],
            },
        },
        filters={
            "add_attrs": {
                "()": AddAttrsFilter,
                "attrs": {
                    "chain_id": envs.CHAIN_ID,
                    "service_name": envs.SERVICE_NAME,
                },
            },
        },
        loggers={
            "logstash": {
                "handlers": ["logstash"],
                "level": envs.LOGSTASH_LOGGING_LEVEL,
                "propagate": False,
            },
        },
        root={
            "handlers": envs.LOG_HANDLERS,
            "level": level,
        },
    )


def logging_basic_config(filename=None, level=None):
    level = level or envs.LOGGING_LEVEL
    if filename is not None:
        logging.basicConfig(level=level, format=LOG_FORMAT, filename=filename)
    elif 'logstash' in envs.LOG_HANDLERS:
        config.dictConfig(logstash_logging_config(level))
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    # SQL statement echo stays off
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
