from collections.abc import Callable
from enum import Enum
import logging

from exporter.sizer.logs import LogsBytesSizer, LogsCountSizer, LogsSizer
from exporter.sizer.metrics import MetricsBytesSizer, MetricsCountSizer, MetricsSizer

logger = logging.getLogger(__name__)


class SizerType(str, Enum):
    ITEMS = 'items'
    BYTES = 'bytes'


_METRICS_SIZERS: dict[SizerType, Callable[[], MetricsSizer]] = {
    SizerType.ITEMS: MetricsCountSizer,
    SizerType.BYTES: MetricsBytesSizer,
}

_LOGS_SIZERS: dict[SizerType, Callable[[], LogsSizer]] = {
    SizerType.ITEMS: LogsCountSizer,
    SizerType.BYTES: LogsBytesSizer,
}


def _resolve(sizer_type: SizerType | str) -> SizerType:
    try:
        return SizerType(sizer_type)
    except ValueError as e:
        allowed = ', '.join(t.value for t in SizerType)
        raise ValueError(
            f'Unknown sizer type {sizer_type!r}, expected one of: {allowed}'
        ) from e


def new_metrics_sizer(sizer_type: SizerType | str) -> MetricsSizer:
    resolved = _resolve(sizer_type)
    sizer = _METRICS_SIZERS[resolved]()
    logger.debug(
        'Metrics sizer selected',
        extra={'sizer_type': resolved.value, 'sizer': type(sizer).__name__},
    )
    return sizer


def new_logs_sizer(sizer_type: SizerType | str) -> LogsSizer:
    resolved = _resolve(sizer_type)
    sizer = _LOGS_SIZERS[resolved]()
    logger.debug(
        'Logs sizer selected',
        extra={'sizer_type': resolved.value, 'sizer': type(sizer).__name__},
    )
    return sizer
