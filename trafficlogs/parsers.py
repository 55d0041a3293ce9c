import logging
import math
import re
from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as date_parser

from .rules import (
    event_type_for_severity,
    event_type_from_message,
    severity_from_code,
    severity_from_label,
)
from .types import IVDCData, LogEntry, PassageData


logger = logging.getLogger(__name__)

TSMC_MIN_FIELDS = 10
ALC_MIN_FIELDS = 8
PASSAGE_MIN_FIELDS = 4
IVDC_MIN_FIELDS = 5

ALC_MESSAGE_TRAILER = "]|~"


def _skip(fmt: str, reason: str, chunk: str) -> None:
    logger.debug("Skipping malformed %s record (%s): %r", fmt, reason, chunk[:120])
    return None


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _plain_number(text: str) -> str:
    text = text.strip()
    if not text.isascii() or "_" in text:
        raise ValueError(f"not a plain number {text!r}")
    return text


def _integer(text: str) -> int:
    text = _plain_number(text)
    if not text.lstrip("+-").isdigit():
        raise ValueError(f"not an integer {text!r}")
    return int(text)


def _finite(text: str) -> float:
    value = float(_plain_number(text))
    if not math.isfinite(value):
        raise ValueError(f"non-finite number {text.strip()!r}")
    return value


# -----------------------------
# CONTROLLER VARIANT A (TSMC)
# -----------------------------

def tsmc_timestamp(date: str, time: str) -> datetime:
    """
    Build a UTC instant from ``YYYYMMDD`` and ``HHMMSSmmm``.

    The time token may also carry separators (``HH:MM:SS.mmm``); they are
    removed before slicing. Missing milliseconds read as zero.
    """
    digits = time.replace(":", "").replace(".", "")
    if len(date) != 8 or not (date.isascii() and date.isdigit()):
        raise ValueError(f"bad date {date!r}")
    if len(digits) < 6 or not (digits.isascii() and digits.isdigit()):
        raise ValueError(f"bad time {time!r}")

    millis = digits[6:9].ljust(3, "0")
    return datetime(
        int(date[0:4]),
        int(date[4:6]),
        int(date[6:8]),
        int(digits[0:2]),
        int(digits[2:4]),
        int(digits[4:6]),
        int(millis) * 1000,
        tzinfo=timezone.utc,
    )


def parse_tsmc(chunk: str) -> Optional[LogEntry]:
    """
    Parse one TSMC record:
      20240115/143022123/x/x/DEV1/fileA/x/x/I/Startup OK/extra
    """
    parts = [p.strip() for p in chunk.split("/") if p]
    if len(parts) < TSMC_MIN_FIELDS:
        return _skip("TSMC", f"{len(parts)} fields", chunk)

    date, time, _, _, device, source_file, _, _, code, message = parts[:TSMC_MIN_FIELDS]

    try:
        timestamp = tsmc_timestamp(date, time)
    except ValueError as e:
        return _skip("TSMC", str(e), chunk)

    severity = severity_from_code(code)

    return LogEntry(
        timestamp=timestamp,
        device=device,
        severity=severity,
        message=message,
        event_type=event_type_for_severity(severity, "Alarm"),
        source_file=source_file,
    )


# -----------------------------
# CONTROLLER VARIANT B (ALC)
# -----------------------------

def parse_alc(chunk: str) -> Optional[LogEntry]:
    """
    Parse one tab-separated ALC record. The message carries the
    ``]|~`` record trailer, which is stripped.
    """
    parts = [p.strip() for p in chunk.split("\t")]
    if len(parts) < ALC_MIN_FIELDS:
        return _skip("ALC", f"{len(parts)} fields", chunk)

    ts, code, _, device, source_file, _, _, message = parts[:ALC_MIN_FIELDS]

    try:
        timestamp = _as_utc(datetime.fromisoformat(ts.replace(" ", "T", 1)))
    except ValueError as e:
        return _skip("ALC", str(e), chunk)

    return LogEntry(
        timestamp=timestamp,
        device=device,
        severity=severity_from_code(code),
        message=message.replace(ALC_MESSAGE_TRAILER, "").strip(),
        event_type=event_type_from_message(message),
        source_file=source_file,
    )


# -----------------------------
# SECURITY APPLIANCE (McAfee)
# -----------------------------

MCAFEE_LINE_RE = re.compile(
    r"""
    ^
    (?P<ts>\d{4}-\d{2}-\d{2}\ \d{2}:\d{2}:\d{2}\.\d{3})
    \s+
    (?P<device>[^(]+)
    \(.*\)
    \s+
    (?P<level>[^:]+)
    :\s+
    (?P<msg>.*)
    $
    """,
    re.VERBOSE,
)


def parse_mcafee(line: str) -> Optional[LogEntry]:
    """
    Parse logs like:
      2024-01-15 14:30:22.123 ePO-Server (4711.12) Warning: scan deferred
    """
    m = MCAFEE_LINE_RE.match(line)
    if not m:
        return _skip("McAfee", "no match", line)

    try:
        timestamp = datetime.fromisoformat(m.group("ts")).replace(tzinfo=timezone.utc)
    except ValueError as e:
        return _skip("McAfee", str(e), line)

    severity = severity_from_label(m.group("level"))

    return LogEntry(
        timestamp=timestamp,
        device=m.group("device").strip(),
        severity=severity,
        message=m.group("msg").strip(),
        event_type=event_type_for_severity(severity, "Event"),
    )


# -----------------------------
# CSV EXPORTS
# -----------------------------

# Fills parts missing from a CSV date: day 1, midnight.
CSV_DATE_DEFAULT = datetime(2001, 1, 1)
# Second default, only used to tell whether the year was given.
_YEAR_CHECK_DEFAULT = datetime(2002, 2, 2)


def csv_timestamp(text: str) -> datetime:
    """
    Lenient date parsing; naive values are taken as UTC.

    A missing day or time falls back to CSV_DATE_DEFAULT, never to the
    current date. Values without a year are rejected.
    """
    text = text.strip()
    parsed = date_parser.parse(text, default=CSV_DATE_DEFAULT)
    if parsed.year != date_parser.parse(text, default=_YEAR_CHECK_DEFAULT).year:
        raise ValueError(f"no year in {text!r}")
    return _as_utc(parsed)


def parse_passage(row: str) -> Optional[PassageData]:
    parts = row.split(",")
    if len(parts) < PASSAGE_MIN_FIELDS:
        return _skip("Passage", f"{len(parts)} fields", row)

    ts, lane, vehicle_class, revenue = parts[:PASSAGE_MIN_FIELDS]

    try:
        record = PassageData(
            timestamp=csv_timestamp(ts),
            lane=_integer(lane),
            vehicle_class=vehicle_class.strip(),
            revenue=_finite(revenue),
        )
    except (ValueError, OverflowError) as e:
        return _skip("Passage", str(e), row)

    if record.lane <= 0 or record.revenue < 0:
        return _skip("Passage", "lane or revenue out of range", row)

    return record


def parse_ivdc(row: str) -> Optional[IVDCData]:
    parts = row.split(",")
    if len(parts) < IVDC_MIN_FIELDS:
        return _skip("IVDC", f"{len(parts)} fields", row)

    ts, lane, occupancy, speed, vehicle_count = parts[:IVDC_MIN_FIELDS]

    try:
        record = IVDCData(
            timestamp=csv_timestamp(ts),
            lane=_integer(lane),
            occupancy=_finite(occupancy),
            speed=_finite(speed),
            vehicle_count=_integer(vehicle_count),
        )
    except (ValueError, OverflowError) as e:
        return _skip("IVDC", str(e), row)

    if record.lane <= 0 or record.vehicle_count < 0:
        return _skip("IVDC", "lane or vehicle count out of range", row)

    return record
