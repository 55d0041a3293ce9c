from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class Severity(str, Enum):
    INFO = "Info"
    WARNING = "Warning"
    ERROR = "Error"
    CRITICAL = "Critical"
    UNKNOWN = "Unknown"


class FileType(str, Enum):
    """
    Declared source of an export.

    The caller picks one of these; nothing is sniffed from content.
    """
    TSMC = "TSMC"
    ALC = "ALC"
    MCAFEE = "McAfee"
    PASSAGE = "Passage"
    IVDC = "IVDC"


@dataclass(frozen=True)
class LogEntry:
    timestamp: datetime
    device: str
    severity: Severity
    message: str
    event_type: str
    source_file: Optional[str] = None


@dataclass(frozen=True)
class PassageData:
    """One toll transaction."""
    timestamp: datetime
    lane: int
    vehicle_class: str
    revenue: float


@dataclass(frozen=True)
class IVDCData:
    """One vehicle-detection sample."""
    timestamp: datetime
    lane: int
    occupancy: float  # percent
    speed: float  # km/h
    vehicle_count: int


@dataclass(frozen=True)
class ParsedData:
    """
    Everything parsed out of one file.

    Only one collection is populated per file; the others stay empty.
    """
    logs: Tuple[LogEntry, ...] = field(default_factory=tuple)
    passage: Tuple[PassageData, ...] = field(default_factory=tuple)
    ivdc: Tuple[IVDCData, ...] = field(default_factory=tuple)

    def is_empty(self) -> bool:
        return not (self.logs or self.passage or self.ivdc)

    def to_dict(self) -> Dict[str, Any]:
        def convert(record) -> Dict[str, Any]:
            out = asdict(record)
            out["timestamp"] = record.timestamp.isoformat()
            if "severity" in out:
                out["severity"] = record.severity.value
            return out

        return {
            "logs": [convert(r) for r in self.logs],
            "passage": [convert(r) for r in self.passage],
            "ivdc": [convert(r) for r in self.ivdc],
        }
