"""JSON logs for the url_shortener Lambda

CloudWatch stores one JSON document per line, so every record is rendered as
a flat object. Anything passed through `extra=` becomes a top-level key, which
is how the request outcome (`event`) and the short code end up searchable:

    {"timestamp": "2025-12-26T12:00:00.000Z", "level": "INFO",
     "logger": "shortlink.lambdas.url_shortener.operations",
     "message": "Short link created. Responding with 200.",
     "shortcode": "q7fEm0", "event": "SHORT_LINK_CREATED"}

`shortlink.lambdas.url_shortener` calls `initialize_logging()` on import, so
the configuration is in place before the handler module logs anything.
"""

import os
import json
import logging
import logging.config
from datetime import datetime, UTC

from shortlink.constants import ENV


# Attributes every LogRecord carries; anything else on a record came from `extra=`
_RESERVED_ATTRS = frozenset(logging.LogRecord('', logging.NOTSET, '', 0, '', (), None).__dict__) | {'message', 'asctime'}


def _utc_timestamp(created: float) -> str:
    return datetime.fromtimestamp(created, tz=UTC).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log = {
            'timestamp': _utc_timestamp(record.created),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        if record.exc_info:
            log['exception'] = self.formatException(record.exc_info)

        log.update((key, value) for key, value in vars(record).items() if key not in _RESERVED_ATTRS and key not in log)
        return json.dumps(log, default=str)


def initialize_logging() -> None:
    """Route the root logger to stdout as JSON at LOG_LEVEL (INFO by default)"""
    logging.config.dictConfig(
        {
            'version': 1,
            'disable_existing_loggers': False,
            'formatters': {'json': {'()': JsonFormatter}},
            'handlers': {
                'stdout': {
                    'class': 'logging.StreamHandler',
                    'formatter': 'json',
                    'stream': 'ext://sys.stdout',
                },
            },
            'root': {'level': os.getenv(ENV.App.LOG_LEVEL, 'INFO').upper(), 'handlers': ['stdout']},
        }
    )
