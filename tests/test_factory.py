import pytest

from exporter.sizer.factory import SizerType, new_logs_sizer, new_metrics_sizer
from exporter.sizer.logs import LogsBytesSizer, LogsCountSizer
from exporter.sizer.metrics import MetricsBytesSizer, MetricsCountSizer


@pytest.mark.parametrize(
    ('sizer_type', 'expected'),
    [
        (SizerType.ITEMS, MetricsCountSizer),
        (SizerType.BYTES, MetricsBytesSizer),
        ('items', MetricsCountSizer),
        ('bytes', MetricsBytesSizer),
    ],
)
def test_new_metrics_sizer(sizer_type: SizerType | str, expected: type) -> None:
    assert isinstance(new_metrics_sizer(sizer_type), expected)


@pytest.mark.parametrize(
    ('sizer_type', 'expected'),
    [(SizerType.ITEMS, LogsCountSizer), (SizerType.BYTES, LogsBytesSizer)],
)
def test_new_logs_sizer(sizer_type: SizerType, expected: type) -> None:
    assert isinstance(new_logs_sizer(sizer_type), expected)


@pytest.mark.parametrize('factory', [new_metrics_sizer, new_logs_sizer])
def test_unknown_sizer_type(factory) -> None:
    with pytest.raises(ValueError, match="Unknown sizer type 'requests'"):
        factory('requests')
