from collections.abc import Iterator
import logging

from opentelemetry.proto.metrics.v1.metrics_pb2 import Metric, MetricsData
import pytest

from exporter.sizer.metrics import MetricsBytesSizer, MetricsCountSizer
from factories import (
    exponential_histogram_metric,
    gauge_metric,
    histogram_metric,
    resource_metrics,
    sum_metric,
    summary_metric,
)


@pytest.fixture
def count_sizer() -> MetricsCountSizer:
    return MetricsCountSizer()


@pytest.fixture
def bytes_sizer() -> MetricsBytesSizer:
    return MetricsBytesSizer()


@pytest.fixture
def two_resources_three_gauges() -> MetricsData:
    """2 resources, 1 scope each, 3 gauge metrics of 2 data points each."""
    return MetricsData(
        resource_metrics=[
            resource_metrics(
                [gauge_metric(f'cpu.usage.{i}', points=2) for i in range(3)],
                service=f'service-{r}',
            )
            for r in range(2)
        ]
    )


@pytest.fixture
def mixed_kinds() -> MetricsData:
    return MetricsData(
        resource_metrics=[
            resource_metrics(
                [
                    gauge_metric('gauge', points=1),
                    sum_metric('sum', points=2),
                    histogram_metric('histogram', points=3),
                ]
            ),
            resource_metrics(
                [
                    exponential_histogram_metric('exp_histogram', points=4),
                    summary_metric('summary', points=5),
                    Metric(name='empty'),
                ]
            ),
        ]
    )


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
