from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Sequence

from trafficlogs.types import IVDCData, LogEntry, PassageData, Severity


# ---------- Output Models ----------

@dataclass
class SeverityCounts:
    name: str
    counts: Dict[Severity, int] = field(default_factory=dict)

    def add(self, severity: Severity) -> None:
        self.counts[severity] = self.counts.get(severity, 0) + 1

    def get(self, severity: Severity) -> int:
        return self.counts.get(severity, 0)


@dataclass(frozen=True)
class LaneSummary:
    lane: int
    vehicles: int
    revenue: float

    @property
    def name(self) -> str:
        return f"Lane {self.lane}"


@dataclass(frozen=True)
class HourlyFlow:
    hour: int
    vehicles: int


@dataclass(frozen=True)
class HourlyCongestion:
    hour: int
    speed: float
    occupancy: float


def hour_label(hour: int) -> str:
    return f"{hour}:00"


# ---------- Log Views ----------

def events_by_device(logs: Sequence[LogEntry]) -> List[SeverityCounts]:
    counts: Dict[str, SeverityCounts] = {}
    for log in logs:
        if log.device not in counts:
            counts[log.device] = SeverityCounts(name=log.device)
        counts[log.device].add(log.severity)
    return list(counts.values())


def timeline_by_hour(logs: Sequence[LogEntry]) -> List[SeverityCounts]:
    """Severity counts per calendar hour, oldest first."""
    buckets: Dict[datetime, SeverityCounts] = {}
    for log in logs:
        hour = log.timestamp.replace(minute=0, second=0, microsecond=0)
        if hour not in buckets:
            buckets[hour] = SeverityCounts(name=hour_label(hour.hour))
        buckets[hour].add(log.severity)
    return [buckets[h] for h in sorted(buckets)]


def recent_logs(logs: Sequence[LogEntry], limit: int = 100) -> List[LogEntry]:
    return sorted(logs, key=lambda log: log.timestamp, reverse=True)[:limit]


# ---------- Traffic Views ----------

def passage_by_lane(passage: Sequence[PassageData]) -> List[LaneSummary]:
    vehicles: Dict[int, int] = {}
    revenue: Dict[int, float] = {}
    for p in passage:
        vehicles[p.lane] = vehicles.get(p.lane, 0) + 1
        revenue[p.lane] = revenue.get(p.lane, 0.0) + p.revenue

    return [
        LaneSummary(lane=lane, vehicles=vehicles[lane], revenue=revenue[lane])
        for lane in sorted(vehicles)
    ]


def traffic_flow_by_hour(
    passage: Sequence[PassageData],
    ivdc: Sequence[IVDCData],
) -> List[HourlyFlow]:
    """
    Vehicles per hour of day. Passage rows count one vehicle each;
    detection samples are only used when there are no passage rows.
    """
    flow: Dict[int, int] = {}
    if passage:
        for p in passage:
            flow[p.timestamp.hour] = flow.get(p.timestamp.hour, 0) + 1
    else:
        for d in ivdc:
            flow[d.timestamp.hour] = flow.get(d.timestamp.hour, 0) + d.vehicle_count

    return [HourlyFlow(hour=h, vehicles=flow[h]) for h in sorted(flow)]


def congestion_by_hour(ivdc: Sequence[IVDCData]) -> List[HourlyCongestion]:
    totals: Dict[int, List[float]] = {}
    for d in ivdc:
        speed, occupancy, count = totals.get(d.timestamp.hour, [0.0, 0.0, 0])
        totals[d.timestamp.hour] = [speed + d.speed, occupancy + d.occupancy, count + 1]

    return [
        HourlyCongestion(hour=h, speed=speed / count, occupancy=occupancy / count)
        for h, (speed, occupancy, count) in sorted(totals.items())
    ]
