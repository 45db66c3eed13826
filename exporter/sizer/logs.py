from abc import ABC, abstractmethod

from opentelemetry.proto.collector.logs.v1.logs_service_pb2 import (
    ExportLogsServiceRequest,
)
from opentelemetry.proto.logs.v1.logs_pb2 import (
    LogRecord,
    LogsData,
    ResourceLogs,
    ScopeLogs,
)

from exporter.sizer.varint import (
    check_field_number,
    check_item_size,
    length_delimited_size,
)

LogsContainer = LogsData | ExportLogsServiceRequest


class LogsSizer(ABC):
    """Size of OTLP logs, the counterpart of ``MetricsSizer`` for log records."""

    @abstractmethod
    def logs_size(self, ld: LogsContainer) -> int:
        raise NotImplementedError

    @abstractmethod
    def resource_logs_size(self, rl: ResourceLogs) -> int:
        raise NotImplementedError

    @abstractmethod
    def scope_logs_size(self, sl: ScopeLogs) -> int:
        raise NotImplementedError

    @abstractmethod
    def log_record_size(self, lr: LogRecord) -> int:
        raise NotImplementedError

    @abstractmethod
    def delta_size(self, new_item_size: int, field_number: int = 1) -> int:
        raise NotImplementedError


class LogsBytesSizer(LogsSizer):
    """Exact OTLP protobuf wire size of logs, computed without encoding."""

    def logs_size(self, ld: LogsContainer) -> int:
        return ld.ByteSize()

    def resource_logs_size(self, rl: ResourceLogs) -> int:
        return rl.ByteSize()

    def scope_logs_size(self, sl: ScopeLogs) -> int:
        return sl.ByteSize()

    def log_record_size(self, lr: LogRecord) -> int:
        return lr.ByteSize()

    def delta_size(self, new_item_size: int, field_number: int = 1) -> int:
        return length_delimited_size(new_item_size, field_number)


class LogsCountSizer(LogsSizer):
    """One unit per log record."""

    def logs_size(self, ld: LogsContainer) -> int:
        return sum(self.resource_logs_size(rl) for rl in ld.resource_logs)

    def resource_logs_size(self, rl: ResourceLogs) -> int:
        return sum(self.scope_logs_size(sl) for sl in rl.scope_logs)

    def scope_logs_size(self, sl: ScopeLogs) -> int:
        return len(sl.log_records)

    def log_record_size(self, lr: LogRecord) -> int:
        return 1

    def delta_size(self, new_item_size: int, field_number: int = 1) -> int:
        check_item_size(new_item_size)
        check_field_number(field_number)
        return new_item_size
