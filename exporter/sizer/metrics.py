from abc import ABC, abstractmethod
from collections.abc import Callable, Sized
from enum import Enum

from opentelemetry.proto.collector.metrics.v1.metrics_service_pb2 import (
    ExportMetricsServiceRequest,
)
from opentelemetry.proto.metrics.v1.metrics_pb2 import (
    ExponentialHistogramDataPoint,
    HistogramDataPoint,
    Metric,
    MetricsData,
    NumberDataPoint,
    ResourceMetrics,
    ScopeMetrics,
    SummaryDataPoint,
)

from exporter.sizer.varint import (
    check_field_number,
    check_item_size,
    length_delimited_size,
)

MetricsContainer = MetricsData | ExportMetricsServiceRequest


class MetricType(str, Enum):
    EMPTY = 'empty'
    GAUGE = 'gauge'
    SUM = 'sum'
    HISTOGRAM = 'histogram'
    EXPONENTIAL_HISTOGRAM = 'exponential_histogram'
    SUMMARY = 'summary'


def metric_type(metric: Metric) -> MetricType:
    """Kind of the populated ``data`` oneof, ``EMPTY`` when unset or unknown."""
    kind = metric.WhichOneof('data')
    if kind is None:
        return MetricType.EMPTY
    try:
        return MetricType(kind)
    except ValueError:
        return MetricType.EMPTY


_DATA_POINTS: dict[MetricType, Callable[[Metric], Sized]] = {
    MetricType.GAUGE: lambda m: m.gauge.data_points,
    MetricType.SUM: lambda m: m.sum.data_points,
    MetricType.HISTOGRAM: lambda m: m.histogram.data_points,
    MetricType.EXPONENTIAL_HISTOGRAM: lambda m: m.exponential_histogram.data_points,
    MetricType.SUMMARY: lambda m: m.summary.data_points,
}


class MetricsSizer(ABC):
    """Size of OTLP metrics at every level of the hierarchy.

    Callers measure an item once and then use ``delta_size`` to learn how much
    the enclosing container grows when that item is appended to it, keeping a
    running total without re-measuring the container.
    """

    @abstractmethod
    def metrics_size(self, md: MetricsContainer) -> int:
        raise NotImplementedError

    @abstractmethod
    def resource_metrics_size(self, rm: ResourceMetrics) -> int:
        raise NotImplementedError

    @abstractmethod
    def scope_metrics_size(self, sm: ScopeMetrics) -> int:
        raise NotImplementedError

    @abstractmethod
    def metric_size(self, metric: Metric) -> int:
        raise NotImplementedError

    @abstractmethod
    def delta_size(self, new_item_size: int, field_number: int = 1) -> int:
        """Growth of a container when an item of ``new_item_size`` is appended.

        ``field_number`` is the number of the repeated field the item goes
        into. Every repeated message field of the OTLP metrics hierarchy is
        numbered below 16.
        """
        raise NotImplementedError

    @abstractmethod
    def number_data_point_size(self, dp: NumberDataPoint) -> int:
        raise NotImplementedError

    @abstractmethod
    def histogram_data_point_size(self, dp: HistogramDataPoint) -> int:
        raise NotImplementedError

    @abstractmethod
    def exponential_histogram_data_point_size(
        self, dp: ExponentialHistogramDataPoint
    ) -> int:
        raise NotImplementedError

    @abstractmethod
    def summary_data_point_size(self, dp: SummaryDataPoint) -> int:
        raise NotImplementedError


class MetricsBytesSizer(MetricsSizer):
    """Exact OTLP protobuf wire size, computed without encoding."""

    def metrics_size(self, md: MetricsContainer) -> int:
        return md.ByteSize()

    def resource_metrics_size(self, rm: ResourceMetrics) -> int:
        return rm.ByteSize()

    def scope_metrics_size(self, sm: ScopeMetrics) -> int:
        return sm.ByteSize()

    def metric_size(self, metric: Metric) -> int:
        return metric.ByteSize()

    def delta_size(self, new_item_size: int, field_number: int = 1) -> int:
        return length_delimited_size(new_item_size, field_number)

    def number_data_point_size(self, dp: NumberDataPoint) -> int:
        return dp.ByteSize()

    def histogram_data_point_size(self, dp: HistogramDataPoint) -> int:
        return dp.ByteSize()

    def exponential_histogram_data_point_size(
        self, dp: ExponentialHistogramDataPoint
    ) -> int:
        return dp.ByteSize()

    def summary_data_point_size(self, dp: SummaryDataPoint) -> int:
        return dp.ByteSize()


class MetricsCountSizer(MetricsSizer):
    """One unit per leaf data point."""

    def metrics_size(self, md: MetricsContainer) -> int:
        return sum(self.resource_metrics_size(rm) for rm in md.resource_metrics)

    def resource_metrics_size(self, rm: ResourceMetrics) -> int:
        return sum(self.scope_metrics_size(sm) for sm in rm.scope_metrics)

    def scope_metrics_size(self, sm: ScopeMetrics) -> int:
        return sum(self.metric_size(metric) for metric in sm.metrics)

    def metric_size(self, metric: Metric) -> int:
        data_points = _DATA_POINTS.get(metric_type(metric))
        if data_points is None:
            return 0
        return len(data_points(metric))

    def delta_size(self, new_item_size: int, field_number: int = 1) -> int:
        check_item_size(new_item_size)
        check_field_number(field_number)
        return new_item_size

    def number_data_point_size(self, dp: NumberDataPoint) -> int:
        return 1

    def histogram_data_point_size(self, dp: HistogramDataPoint) -> int:
        return 1

    def exponential_histogram_data_point_size(
        self, dp: ExponentialHistogramDataPoint
    ) -> int:
        return 1

    def summary_data_point_size(self, dp: SummaryDataPoint) -> int:
        return 1
