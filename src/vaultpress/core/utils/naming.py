"""Deterministic output filenames from a source name and a timestamp"""

from datetime import datetime


FALLBACK_NAME = "DnD_Adventure"
TIMESTAMP_FORMAT = "%Y%m%d_%H%M%S"


def timestamp(now: datetime = None) -> str:
    """Return now (default: current local time) formatted as yyyyMMdd_HHmmss."""
    return (now or datetime.now()).strftime(TIMESTAMP_FORMAT)


def derive_name(source_name: str | None, extension: str, stamp: str, fallback: str = FALLBACK_NAME) -> str:
    """Build '<base>_<stamp>.<extension>', base being source_name minus its extension or fallback."""
    base = source_name.rsplit('.', 1)[0] if source_name and '.' in source_name else source_name
    return f"{base or fallback}_{stamp}.{extension.lstrip('.')}"
