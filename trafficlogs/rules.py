from typing import List, Tuple

from .types import Severity


# Ordered rule tables: first match wins, anything else falls through
# to the default.

# Single-character codes used by both controller exports.
SEVERITY_CODES: List[Tuple[str, Severity]] = [
    ("I", Severity.INFO),
    ("W", Severity.WARNING),
    ("E", Severity.ERROR),
]

# Substrings of the security appliance's severity label (lowercased).
SEVERITY_LABELS: List[Tuple[str, Severity]] = [
    ("info", Severity.INFO),
    ("warn", Severity.WARNING),
    ("error", Severity.ERROR),
]

# Substrings of a lowercased controller B message.
ALC_EVENT_TYPES: List[Tuple[str, str]] = [
    ("restart", "Restart"),
]


def severity_from_code(code: str) -> Severity:
    """
    Map a controller severity code to a Severity.

    Exact match only. It should NEVER throw.
    """
    for marker, severity in SEVERITY_CODES:
        if code == marker:
            return severity
    return Severity.UNKNOWN


def severity_from_label(label: str) -> Severity:
    lowered = (label or "").lower()
    for marker, severity in SEVERITY_LABELS:
        if marker in lowered:
            return severity
    return Severity.UNKNOWN


def event_type_for_severity(severity: Severity, otherwise: str) -> str:
    return "Info" if severity is Severity.INFO else otherwise


def event_type_from_message(message: str, default: str = "Alarm") -> str:
    lowered = message.lower()
    for marker, event_type in ALC_EVENT_TYPES:
        if marker in lowered:
            return event_type
    return default
