"""
Find a document or create it, optionally upserting, in one atomic call.

The store is asked to run a single findAndModify with ``upsert`` enabled.
Without the ``upsert`` option the document is sent under ``$setOnInsert``,
so a matched record comes back untouched and the document is only written
when nothing matched. With ``upsert`` the document updates the match or
creates the record.
"""

import collections
import enum
import logging
from concurrent.futures import Future

from findorcreate.commands import find_and_modify
from findorcreate.exceptions import ArgumentError
from findorcreate.options import merge_options, validate_options
from findorcreate.serializer import serialize_type

logger = logging.getLogger(__name__)

_MISSING = object()


class UpdateMode(enum.Enum):
    INSERT_ONLY = 'insert_only'
    FULL_UPSERT = 'full_upsert'

    @classmethod
    def from_options(cls, options):
        if options.get('upsert'):
            return cls.FULL_UPSERT
        return cls.INSERT_ONLY


class FindOrCreateResult(
        collections.namedtuple('FindOrCreateResult', ['doc', 'is_new'])):
    """The returned record and whether it was inserted by this call."""
    __slots__ = ()

    def serialize(self):
        return {
            'doc': serialize_type(self.doc),
            'isNew': self.is_new,
        }


class FindOrCreatePromise(Future):
    """A settled future which can also hand its outcome to a callback."""

    def exec(self, callback):
        """Call ``callback(error, result)`` with the outcome."""
        error = self.exception()
        if error is not None:
            return callback(error, None)
        return callback(None, self.result())


def _is_operator(key):
    return key.startswith('$')


def _conflicts(path, paths):
    """Whether updating ``path`` collides with any of ``paths``."""
    for other in paths:
        if path == other or other.startswith(path + '.') \
                or path.startswith(other + '.'):
            return True
    return False


def _equality_paths(query):
    """Paths an upsert copies from the equality conditions of the query."""
    paths = set()
    for key, value in query.items():
        if key == '$and':
            for clause in value:
                paths.update(_equality_paths(clause))
        elif _is_operator(key):
            continue
        elif isinstance(value, dict) and any(map(_is_operator, value)):
            if '$eq' in value:
                paths.add(key)
        else:
            paths.add(key)
    return paths


def _pinned_paths(query, update):
    """Paths the insert takes from the query or the update payload."""
    paths = _equality_paths(query)
    for operator, operator_fields in update.items():
        paths.update(operator_fields)
        if operator == '$rename':
            paths.update(operator_fields.values())
    return paths


def build_update(mode, doc, query=None, insert_defaults=None):
    """
    Build the update payload sent to the store.

    ``insert_defaults`` are added under ``$setOnInsert`` for every path not
    already set by an equality condition of the query or by the payload.
    """
    query = query or {}
    doc = dict(doc or {})
    if mode is UpdateMode.INSERT_ONLY:
        update = {'$setOnInsert': doc} if doc else {}
    else:
        update = {key: dict(value) for key, value in doc.items()
                  if _is_operator(key)}
        plain = {key: value for key, value in doc.items()
                 if not _is_operator(key)}
        if plain:
            update.setdefault('$set', {}).update(plain)

    if insert_defaults:
        pinned = _pinned_paths(query, update)
        for path, value in insert_defaults.items():
            if not _conflicts(path, pinned):
                update.setdefault('$setOnInsert', {})[path] = value

    if not update:
        # An empty operand leaves a match untouched (MongoDB 5.0+).
        update = {'$setOnInsert': {}}
    return update


def _execute(model, collection, query, doc, options):
    """Run the operation once and normalize its outcome."""
    mode = UpdateMode.from_options(options)
    merged = merge_options(options, model.option_defaults())
    insert_defaults = None
    if merged['set_defaults_on_insert']:
        insert_defaults = model.insert_defaults()
    update = build_update(mode, doc, query, insert_defaults)
    logger.debug('find-or-create on %s (%s).', collection.name, mode.value)
    record, raw = find_and_modify(collection, query, update, merged)
    return FindOrCreateResult(
        doc=record, is_new=not raw.get('updatedExisting', False))


def _settle(operation, collection_name):
    """Run the operation, capturing its result or error in a promise."""
    promise = FindOrCreatePromise()
    try:
        result = operation()
    except Exception as exc:
        logger.warning('find-or-create on %s failed: %s', collection_name, exc)
        promise.set_exception(exc)
    else:
        promise.set_result(result)
    return promise


def find_or_create(model, query=_MISSING, doc=_MISSING, options=None,
                   callback=None):
    """
    Find the record matching ``query`` or create it from ``doc``.

    :param model: the Model class to operate on.
    :param query: filter selecting the record.
    :param doc: fields of the record to create, or with the ``upsert``
        option, the update to apply.
    :param options: optional mapping: ``upsert``, ``new``,
        ``set_defaults_on_insert``, ``fields``, ``sort``, ``max_time_ms``;
        other keys go to the store unchanged. A callable given here is
        taken as the callback.
    :param callback: optional ``callback(error, result)``.
    :return: the callback's return value when a callback is given,
        otherwise a settled FindOrCreatePromise of a FindOrCreateResult.
    :raises ArgumentError: when ``query`` or ``doc`` is missing, or the
        options are malformed. Store errors are never raised from here.
    """
    if query is _MISSING or doc is _MISSING:
        raise ArgumentError()
    if callback is None and callable(options):
        callback, options = options, None
    options = dict(options or {})
    validate_options(options)
    collection = model.collection()

    promise = _settle(
        lambda: _execute(model, collection, query, doc, options),
        collection.name)
    if callback is not None:
        return promise.exec(callback)
    return promise
