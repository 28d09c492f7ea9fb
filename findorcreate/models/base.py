"""Base class for collection-bound models."""

from findorcreate.exceptions import StoreNotInitialized
from findorcreate.find_or_create import find_or_create
from findorcreate.options import DEFAULT_OPTIONS


class Model:
    """
    A handle on one collection of the document store.

    Subclasses name their collection with ``__collection__`` (the lower-cased
    class name otherwise) and may declare insert-time ``defaults``. Values in
    ``defaults`` that are callable are called for every insert. Defaults
    declared on mixins and base classes are combined, the most derived class
    winning.
    """
    __store__ = None
    __collection__ = None
    defaults = {}

    find_or_create = classmethod(find_or_create)

    @classmethod
    def collection_name(cls):
        return cls.__collection__ or cls.__name__.lower()

    @classmethod
    def collection(cls):
        """The pymongo collection backing this model."""
        if cls.__store__ is None:
            raise StoreNotInitialized(
                "Model '{}' is not bound to a document store.".format(
                    cls.__name__))
        return cls.__store__.get_collection(cls.collection_name())

    @classmethod
    def option_defaults(cls):
        if cls.__store__ is None:
            return dict(DEFAULT_OPTIONS)
        return dict(cls.__store__.option_defaults)

    @classmethod
    def insert_defaults(cls):
        """Evaluate the declared defaults for a single insert."""
        declared = {}
        for klass in reversed(cls.__mro__):
            declared.update(vars(klass).get('defaults', {}))
        return {field: value() if callable(value) else value
                for field, value in declared.items()}
