"""The findAndModify command, the only call made to the store."""

from findorcreate.options import build_command_options


def find_and_modify(collection, query, update, options):
    """
    Run one atomic findAndModify command against the collection.

    Returns the record and the raw ``lastErrorObject`` of the reply, which
    tells whether an existing record was matched. Errors raised by pymongo
    are not caught.
    """
    command_options = build_command_options(options)
    reply = collection.database.command(
        'findAndModify',
        collection.name,
        query=query,
        update=update,
        **command_options)
    return reply.get('value'), reply.get('lastErrorObject', {})
