"""Atomic find-or-create for MongoDB models."""

from findorcreate.exceptions import (
    ArgumentError,
    FindOrCreateException,
    OptionsSchemaException,
    StoreNotInitialized,
)
from findorcreate.find_or_create import (
    FindOrCreatePromise,
    FindOrCreateResult,
    UpdateMode,
    find_or_create,
)
from findorcreate.models import Model, TimestampsMixin
from findorcreate.store import DocumentStore

__all__ = [
    'ArgumentError',
    'DocumentStore',
    'FindOrCreateException',
    'FindOrCreatePromise',
    'FindOrCreateResult',
    'Model',
    'OptionsSchemaException',
    'StoreNotInitialized',
    'TimestampsMixin',
    'UpdateMode',
    'find_or_create',
]
