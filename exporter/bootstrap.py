import logging

from exporter.batcher import MetricsBatcher
from exporter.config import Settings, settings
from exporter.logging import setup_logging

logger = logging.getLogger(__name__)


def bootstrap(config: Settings = settings) -> MetricsBatcher:
    """Configure logging and build the metrics batcher from settings."""
    setup_logging(
        service_name=config.SERVICE_NAME,
        level=config.LOG_LEVEL,
        log_format=config.LOG_FORMAT,
        version=config.SERVICE_VERSION,
    )
    batcher = MetricsBatcher.from_settings(config)
    logger.info(
        'Metrics batching configured',
        extra={
            'sizer_type': config.SIZER_TYPE.value,
            'max_size': config.BATCH_MAX_SIZE,
        },
    )
    return batcher
