import logging
from pathlib import Path
import sys
from typing import Any

import orjson

LOG_CONFIG_PATH = Path(__file__).parent / 'log_config.json'


def load_log_config(config_path: Path = LOG_CONFIG_PATH) -> dict[str, Any]:
    try:
        data = orjson.loads(config_path.read_bytes())
    except FileNotFoundError as e:
        raise RuntimeError(f'Log config file not found: {config_path}') from e
    except orjson.JSONDecodeError as e:
        raise RuntimeError(f'Invalid JSON in log config file {config_path}: {e}') from e
    if not isinstance(data, dict):
        raise RuntimeError(
            f'Expected JSON object in {config_path}, got {type(data).__name__}'
        )
    data['standard_fields'] = set(data.get('standard_fields', []))
    data['size_fields'] = tuple(data.get('size_fields', []))
    return data


DEFAULT_LOG_CONFIG: dict[str, Any] = load_log_config()


class SizeAwareFormatter(logging.Formatter):
    """Base for formatters that surface sizing context from ``extra``.

    Fields listed under ``size_fields`` in the log config (``sizer_type``,
    ``item_size``, ``max_size``, ...) always come first and in that order, so
    batching decisions read the same whichever component logged them. Other
    extra fields follow sorted by name.
    """

    def __init__(
        self,
        service_name: str,
        version: str,
        config: dict[str, Any] | None = None,
    ):
        config = config or DEFAULT_LOG_CONFIG
        super().__init__(datefmt=config['datefmt'])
        self.service_name = service_name
        self.version = version
        self.standard_fields: set[str] = config['standard_fields']
        self.size_fields: tuple[str, ...] = config['size_fields']

    def context(self, record: logging.LogRecord) -> dict[str, Any]:
        extra = {
            key: value
            for key, value in record.__dict__.items()
            if key not in self.standard_fields and not key.startswith('_')
        }
        ordered = {key: extra.pop(key) for key in self.size_fields if key in extra}
        ordered.update(sorted(extra.items()))
        return ordered


class JsonFormatter(SizeAwareFormatter):
    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            'timestamp': self.formatTime(record, self.datefmt),
            'level': record.levelname,
            'service': self.service_name,
            'version': self.version,
            'logger': record.name,
            'message': record.getMessage(),
            **self.context(record),
        }
        if record.exc_info:
            entry['exception'] = self.formatException(record.exc_info)
        return orjson.dumps(entry, default=str).decode('utf-8')


class TextFormatter(SizeAwareFormatter):
    def format(self, record: logging.LogRecord) -> str:
        fields = ' '.join(f'{k}={v}' for k, v in self.context(record).items())
        line = (
            f'{self.formatTime(record, self.datefmt)} {record.levelname:<8} '
            f'{self.service_name}/{self.version} {record.name}: '
            f'{record.getMessage()}'
        )
        if fields:
            line = f'{line} | {fields}'
        if record.exc_info:
            line += f'\n{self.formatException(record.exc_info)}'
        return line


FORMATTERS: dict[str, type[SizeAwareFormatter]] = {
    'json': JsonFormatter,
    'text': TextFormatter,
}


def setup_logging(
    service_name: str,
    level: str,
    log_format: str,
    version: str,
) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter_cls = FORMATTERS.get(log_format.lower(), TextFormatter)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter_cls(service_name=service_name, version=version))
    handler.setLevel(log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    # protobuf's pure-python backend logs descriptor loading at debug
    logging.getLogger('google.protobuf').setLevel(logging.WARNING)
