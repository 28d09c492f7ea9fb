"""Exceptions raised by the find-or-create helper itself.

Errors reported by the document store are never wrapped in these; they reach
the caller exactly as pymongo raised them.
"""


class FindOrCreateException(Exception):
    """Base class for errors raised before the store is contacted."""
    default_message = 'Invalid find-or-create call.'

    def __init__(self, message_override=None):
        message = message_override or self.default_message
        super().__init__(message)
        self.message = message


class ArgumentError(FindOrCreateException, TypeError):
    """The query and document arguments were not both supplied."""
    default_message = ("find-or-create requires at least the 'query' and "
                       "'doc' arguments.")


class OptionsSchemaException(ArgumentError):
    """A recognized option does not have the expected type or shape."""
    default_message = 'Find-or-create options do not conform to the schema.'


class StoreNotInitialized(FindOrCreateException, RuntimeError):
    """A model was used before its store was bound to an application."""
    default_message = 'The document store has not been initialized.'
