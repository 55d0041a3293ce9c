from typing import Dict, List, Sequence

from trafficlogs.types import IVDCData, ParsedData, Severity


# Returned when no hour has a positive vehicle count.
NO_PEAK_HOUR = -1


def find_peak_hour(ivdc: Sequence[IVDCData]) -> int:
    """
    Hour of day (UTC) with the most detected vehicles.

    Ties go to the earliest hour. Returns NO_PEAK_HOUR when there is no
    data or every hour sums to zero.
    """
    hourly: Dict[int, int] = {}
    for d in ivdc:
        hourly[d.timestamp.hour] = hourly.get(d.timestamp.hour, 0) + d.vehicle_count

    peak, peak_count = NO_PEAK_HOUR, 0
    for hour in sorted(hourly):
        if hourly[hour] > peak_count:
            peak, peak_count = hour, hourly[hour]
    return peak


def peak_hour_window(hour: int) -> str:
    if hour == NO_PEAK_HOUR:
        return "not detected"
    return f"{hour}:00 - {hour + 1}:00"


def unique_devices(data: ParsedData) -> List[str]:
    return list(dict.fromkeys(log.device for log in data.logs))


def create_data_summary(data: ParsedData) -> str:
    summary = "Data Summary:\n"

    if data.logs:
        errors = sum(1 for log in data.logs if log.severity is Severity.ERROR)
        warnings = sum(1 for log in data.logs if log.severity is Severity.WARNING)
        restarts = sum(1 for log in data.logs if "restart" in log.message.lower())

        summary += f"""
- **Log Analysis:**
  - Total Log Entries: {len(data.logs)}
  - Error Count: {errors}
  - Warning Count: {warnings}
  - System Restarts Detected: {restarts}
  - Devices Reporting: {", ".join(unique_devices(data))}
"""

    if data.passage:
        revenue = sum(p.revenue for p in data.passage)
        lanes = len({p.lane for p in data.passage})

        summary += f"""
- **Passage/Transaction Analysis:**
  - Total Vehicles Processed: {len(data.passage)}
  - Total Revenue Generated: ${revenue:.2f}
  - Number of Active Lanes: {lanes}
"""

    if data.ivdc:
        avg_occupancy = sum(d.occupancy for d in data.ivdc) / len(data.ivdc)
        avg_speed = sum(d.speed for d in data.ivdc) / len(data.ivdc)

        summary += f"""
- **IVDC (Vehicle Detection) Analysis:**
  - Average Lane Occupancy: {avg_occupancy:.1f}%
  - Average Vehicle Speed: {avg_speed:.1f} km/h
  - Detected Peak Traffic Hour: {peak_hour_window(find_peak_hour(data.ivdc))}
"""

    return summary
