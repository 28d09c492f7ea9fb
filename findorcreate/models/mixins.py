from datetime import datetime, timezone


def _utcnow():
    return datetime.now(timezone.utc)


class TimestampsMixin:
    """Stamp inserted documents with creation and modification times."""
    defaults = {
        'created': _utcnow,
        'modified': _utcnow,
    }
