from datetime import datetime, timezone

from summary import NO_PEAK_HOUR, create_data_summary, find_peak_hour, peak_hour_window
from trafficlogs.ingest import parse_file
from trafficlogs.types import IVDCData, LogEntry, ParsedData, PassageData, Severity


def at(hour):
    return datetime(2024, 1, 15, hour, 0, tzinfo=timezone.utc)


def test_peak_hour_from_parsed_detection_rows():
    data = parse_file(
        "IVDC",
        "timestamp,lane,occupancy,speed,vehicle_count\n"
        "2024-01-15T08:00:00,1,40.2,55.5,12\n"
        "2024-01-15T17:00:00,1,61.0,32.0,30\n",
    )
    assert find_peak_hour(data.ivdc) == 17


def test_peak_hour_sums_across_days_and_lanes():
    ivdc = [
        IVDCData(at(8), 1, 0.0, 0.0, 10),
        IVDCData(at(8), 2, 0.0, 0.0, 10),
        IVDCData(at(17), 1, 0.0, 0.0, 15),
    ]
    assert find_peak_hour(ivdc) == 8


def test_peak_hour_tie_goes_to_earliest_hour():
    ivdc = [IVDCData(at(17), 1, 0.0, 0.0, 5), IVDCData(at(9), 1, 0.0, 0.0, 5)]
    assert find_peak_hour(ivdc) == 9


def test_peak_hour_sentinel_without_traffic():
    assert find_peak_hour([]) == NO_PEAK_HOUR
    assert find_peak_hour([IVDCData(at(8), 1, 0.0, 0.0, 0)]) == NO_PEAK_HOUR
    assert peak_hour_window(NO_PEAK_HOUR) == "not detected"
    assert peak_hour_window(17) == "17:00 - 18:00"


def test_log_summary():
    data = ParsedData(logs=(
        LogEntry(at(8), "ALC-01", Severity.ERROR, "Network timeout", "Alarm"),
        LogEntry(at(8), "VMS-North", Severity.WARNING, "Controller Restart", "Restart"),
        LogEntry(at(9), "ALC-01", Severity.INFO, "Startup OK", "Info"),
    ))
    summary = create_data_summary(data)

    assert "Total Log Entries: 3" in summary
    assert "Error Count: 1" in summary
    assert "Warning Count: 1" in summary
    assert "System Restarts Detected: 1" in summary
    assert "Devices Reporting: ALC-01, VMS-North" in summary
    assert "Passage" not in summary


def test_traffic_summaries():
    data = ParsedData(passage=(
        PassageData(at(8), 1, "Car", 2.5),
        PassageData(at(8), 2, "Truck", 7.2),
    ))
    summary = create_data_summary(data)

    assert "Total Vehicles Processed: 2" in summary
    assert "Total Revenue Generated: $9.70" in summary
    assert "Number of Active Lanes: 2" in summary

    data = ParsedData(ivdc=(
        IVDCData(at(8), 1, 40.0, 50.0, 12),
        IVDCData(at(17), 1, 20.0, 60.0, 20),
    ))
    summary = create_data_summary(data)

    assert "Average Lane Occupancy: 30.0%" in summary
    assert "Average Vehicle Speed: 55.0 km/h" in summary
    assert "Detected Peak Traffic Hour: 17:00 - 18:00" in summary
