import json
import logging
import sys
import traceback
from datetime import UTC, date, datetime

CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'

# Attributes the client attaches through `extra=` on its log calls
CONTEXT_FIELDS = ('endpoint', 'base_currency', 'error_code')


class RateJSONEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, date):
            return o.isoformat()
        return super().default(o)


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record, tagged with the application name.

    Request context passed via `extra=` (endpoint, base currency, API error
    code) is lifted into a `fixer` object so log shippers can index it.
    """

    def __init__(self, app_name: str | None = None):
        super().__init__()
        self.app_name = app_name

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            'timestamp': datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            'app': self.app_name,
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }

        context = {
            field: getattr(record, field) for field in CONTEXT_FIELDS if hasattr(record, field)
        }
        if context:
            log_entry['fixer'] = context

        if record.exc_info:
            exc_type, exc, tb = record.exc_info
            log_entry['exception'] = {
                'type': exc_type.__name__,
                'message': str(exc),
                'traceback': traceback.format_exception(exc_type, exc, tb),
            }
            # ExchangeResponseError carries the API error code
            if getattr(exc, 'code', None) is not None:
                log_entry['exception']['code'] = exc.code

        return json.dumps(log_entry, ensure_ascii=False, cls=RateJSONEncoder)


def setup_logging(level: str = 'INFO', json_output: bool = False, app_name: str | None = None) -> logging.Handler:
    """Install a single stdout handler on the root logger and return it."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(getattr(logging, level.upper()))

    logging.getLogger('httpx').setLevel(logging.WARNING)

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        handler.setFormatter(JSONFormatter(app_name))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
    root_logger.addHandler(handler)

    return handler
