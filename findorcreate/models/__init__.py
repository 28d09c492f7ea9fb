"""Model base classes."""

from findorcreate.models.base import Model
from findorcreate.models.mixins import TimestampsMixin

__all__ = [
    'Model',
    'TimestampsMixin',
]
