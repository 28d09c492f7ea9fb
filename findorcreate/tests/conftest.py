"""Setup pytest fixtures."""

import mongomock
import pytest
from pymongo import ReturnDocument
from pymongo.errors import OperationFailure

from findorcreate.app import create_app
from findorcreate.app import store as document_store
from findorcreate.models import TimestampsMixin

_TOP_LEVEL_OPERATORS = {
    '$and', '$or', '$nor', '$where', '$expr', '$text', '$comment',
    '$jsonSchema',
}


class Person(document_store.Model):
    """Model without insert defaults."""
    __collection__ = 'tests'


class Recruit(TimestampsMixin, document_store.Model):
    """Model with insert defaults."""
    defaults = {
        'age': 18,
        'tags': list,
    }


def _answer_find_and_modify(database, command, value=1, **kwargs):
    """Answer a findAndModify command the way a MongoDB server does."""
    assert command == 'findAndModify'
    query = kwargs['query']
    for key in query:
        if key.startswith('$') and key not in _TOP_LEVEL_OPERATORS:
            raise OperationFailure(
                'unknown top level operator: {}'.format(key), code=2)
    collection = database.get_collection(value)
    sort = list(kwargs['sort'].items()) if kwargs.get('sort') else None
    existing = collection.find_one(query, sort=sort)
    if kwargs.get('new'):
        return_document = ReturnDocument.AFTER
    else:
        return_document = ReturnDocument.BEFORE
    record = collection.find_one_and_update(
        query,
        kwargs['update'],
        projection=kwargs.get('fields'),
        sort=sort,
        upsert=kwargs.get('upsert', False),
        return_document=return_document)
    return {
        'lastErrorObject': {'n': 1, 'updatedExisting': existing is not None},
        'value': record,
        'ok': 1.0,
    }


@pytest.fixture(scope="session", autouse=True)
def app_fixture():
    """Setup an app backed by an in-memory MongoDB client."""
    findorcreate_app = create_app(client=mongomock.MongoClient())
    return findorcreate_app


@pytest.fixture(scope="session")
def store(app_fixture):
    return document_store


@pytest.fixture(autouse=True)
def server_commands(monkeypatch):
    """Let the in-memory client answer findAndModify commands."""
    commands = []

    def command(self, command, value=1, **kwargs):
        commands.append((command, value, kwargs))
        return _answer_find_and_modify(self, command, value, **kwargs)

    monkeypatch.setattr(mongomock.Database, 'command', command)
    yield commands


@pytest.fixture(autouse=True)
def conan(store):
    """Reset the test collections to a single record for Conan."""
    store.database.drop_collection(Person.collection_name())
    store.database.drop_collection(Recruit.collection_name())
    Person.collection().insert_one({'name': 'Conan', 'age': 28})
    yield Person.collection().find_one({'name': 'Conan'})


@pytest.fixture
def person():
    return Person


@pytest.fixture
def recruit():
    return Recruit
