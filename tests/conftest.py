"""
Shared sample builders for the test suite.

Each builder returns one minimal, well-formed record for its format so
tests can drop or corrupt single fields.
"""
import pytest


def tsmc_fields(date="20240115", time="143022123", device="DEV1",
                source_file="fileA", code="I", message="Startup OK"):
    return [date, time, "x", "x", device, source_file, "x", "x", code, message]


def tsmc_record(**kwargs):
    return "/".join(tsmc_fields(**kwargs)) + ":)"


def alc_fields(timestamp="2024-01-15 14:30:22", code="E", device="ALC-01",
               source_file="alc_main.c", message="Network timeout"):
    return [timestamp, code, "17", device, source_file, "0", "0", message + "]|~"]


def alc_record(**kwargs):
    return "~|[" + "\t".join(alc_fields(**kwargs))


def mcafee_line(timestamp="2024-01-15 14:30:22.123", device="ePO-Server",
                level="Warning", message="Signature update deferred"):
    return f"{timestamp} {device} (4711.12) {level}: {message}"


def passage_fields(timestamp="2024-01-15T10:00:00", lane="3",
                   vehicle_class="Car", revenue="2.50"):
    return [timestamp, lane, vehicle_class, revenue]


def ivdc_fields(timestamp="2024-01-15T08:00:00", lane="1", occupancy="40.2",
                speed="55.5", vehicle_count="12"):
    return [timestamp, lane, occupancy, speed, vehicle_count]


PASSAGE_HEADER = "timestamp,lane,class,revenue"
IVDC_HEADER = "timestamp,lane,occupancy,speed,vehicle_count"


@pytest.fixture
def sample_file(tmp_path):
    """Write content to a temporary export file and return its path."""
    def _write(content, name="export.txt"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
        return path
    return _write
