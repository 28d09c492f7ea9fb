"""Convert stored documents to JSON-ready values."""

from datetime import datetime, timezone

from bson import ObjectId


def serialize_type(obj):
    """Recursively serialize according to type."""
    if isinstance(obj, dict):
        return {key: serialize_type(value) for key, value in obj.items()}
    elif isinstance(obj, (list, tuple)):
        return [serialize_type(item) for item in obj]
    elif isinstance(obj, datetime):
        # Naive values from the store are UTC.
        if obj.tzinfo is None:
            obj = obj.replace(tzinfo=timezone.utc)
        return int(obj.timestamp())
    elif isinstance(obj, ObjectId):
        return str(obj)
    elif isinstance(obj, (bool, int, float, str)):
        return obj
    elif obj is None:
        return None
    return str(obj)
