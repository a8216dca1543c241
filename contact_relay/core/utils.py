from datetime import datetime, timezone


def iso_timestamp() -> str:
    """Current UTC time as ISO-8601 with millisecond precision, e.g. 2026-01-05T09:30:00.123Z"""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
