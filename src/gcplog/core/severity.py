"""Level to Cloud Logging severity mapping."""

from gcplog.core.models import Level


def level_to_severity(level: int) -> str:
    """Convert a numeric level to a Cloud Logging severity string.

    Levels map up by threshold, so custom levels above ``Level.ERROR``
    (e.g. ``logging.CRITICAL``) still map to ``"ERROR"``.

    Args:
        level: Any value on the ordered level scale.

    Returns:
        One of "DEBUG", "INFO", "WARNING" or "ERROR".
    """
    if level >= Level.ERROR:
        return "ERROR"
    if level >= Level.WARN:
        return "WARNING"
    if level >= Level.INFO:
        return "INFO"
    return "DEBUG"
