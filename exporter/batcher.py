import logging

from opentelemetry.proto.metrics.v1.metrics_pb2 import MetricsData, ResourceMetrics

from exporter.config import Settings
from exporter.sizer.factory import new_metrics_sizer
from exporter.sizer.metrics import MetricsSizer

logger = logging.getLogger(__name__)

# MetricsData.resource_metrics
RESOURCE_METRICS_FIELD = 1


class MetricsBatcher:
    """Accumulates resource metrics until the configured size limit.

    Each item is measured once; the batch size is then maintained with
    ``delta_size`` so it always equals ``sizer.metrics_size(batch)``.
    Not thread-safe.
    """

    def __init__(self, sizer: MetricsSizer, max_size: int) -> None:
        if max_size <= 0:
            raise ValueError(f'max_size must be positive, got {max_size}')
        self.sizer = sizer
        self.max_size = max_size

        self._batch = MetricsData()
        self._size = 0

    @classmethod
    def from_settings(cls, settings: Settings) -> 'MetricsBatcher':
        return cls(
            sizer=new_metrics_sizer(settings.SIZER_TYPE),
            max_size=settings.BATCH_MAX_SIZE,
        )

    @property
    def size(self) -> int:
        return self._size

    @property
    def pending(self) -> MetricsData:
        """Copy of the batch accumulated so far."""
        batch = MetricsData()
        batch.CopyFrom(self._batch)
        return batch

    def __len__(self) -> int:
        return len(self._batch.resource_metrics)

    def add(self, rm: ResourceMetrics) -> list[MetricsData]:
        """Append ``rm`` and return the batches that had to be flushed first."""
        delta = self.sizer.delta_size(
            self.sizer.resource_metrics_size(rm), RESOURCE_METRICS_FIELD
        )
        flushed: list[MetricsData] = []

        if self._batch.resource_metrics and self._size + delta > self.max_size:
            batch = self.flush()
            if batch is not None:
                flushed.append(batch)

        if delta > self.max_size:
            logger.warning(
                'Item exceeds batch limit on its own',
                extra={
                    'sizer': type(self.sizer).__name__,
                    'item_size': delta,
                    'max_size': self.max_size,
                },
            )

        self._batch.resource_metrics.add().CopyFrom(rm)
        self._size += delta
        return flushed

    def flush(self) -> MetricsData | None:
        if not self._batch.resource_metrics:
            return None
        batch, size = self._batch, self._size
        self._batch = MetricsData()
        self._size = 0
        logger.debug(
            'Metrics batch flushed',
            extra={
                'size': size,
                'resource_metrics': len(batch.resource_metrics),
                'sizer': type(self.sizer).__name__,
            },
        )
        return batch
