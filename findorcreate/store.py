"""Flask extension binding models to a MongoDB database."""

import logging

from pymongo import MongoClient

from findorcreate.exceptions import StoreNotInitialized
from findorcreate.models.base import Model
from findorcreate.options import DEFAULT_OPTIONS

logger = logging.getLogger(__name__)


class DocumentStore:
    """Flask extension holding the MongoDB client used by models."""

    def __init__(self, app=None, client=None):
        self.client = None
        self.database_name = None
        self.option_defaults = dict(DEFAULT_OPTIONS)
        self.Model = self._make_model_base()
        if app is not None:
            self.init_app(app, client)

    def init_app(self, app, client=None):
        if not hasattr(app, 'extensions'):
            app.extensions = {}
        app.extensions['find-or-create'] = self
        self._set_default_configuration_options(app)
        self.database_name = app.config['MONGO_DATABASE']
        self.option_defaults = {
            'new': app.config['FIND_OR_CREATE_NEW'],
            'set_defaults_on_insert':
                app.config['FIND_OR_CREATE_SET_DEFAULTS_ON_INSERT'],
        }
        if client is None:
            timeout = app.config['MONGO_CONNECT_TIMEOUT_MS']
            client = MongoClient(
                app.config['MONGO_URI'],
                connectTimeoutMS=timeout,
                serverSelectionTimeoutMS=timeout)
        self.client = client
        logger.info('Document store bound to database %s.', self.database_name)

    @staticmethod
    def _set_default_configuration_options(app):
        app.config.setdefault('MONGO_URI', 'mongodb://localhost:27017')
        app.config.setdefault('MONGO_DATABASE', 'findorcreate')
        app.config.setdefault('MONGO_CONNECT_TIMEOUT_MS', 20000)
        app.config.setdefault('FIND_OR_CREATE_NEW', DEFAULT_OPTIONS['new'])
        app.config.setdefault(
            'FIND_OR_CREATE_SET_DEFAULTS_ON_INSERT',
            DEFAULT_OPTIONS['set_defaults_on_insert'])

    def _make_model_base(self):
        """Create a Model base class bound to this store."""
        return type('Model', (Model,), {
            '__module__': Model.__module__,
            '__store__': self,
            '__doc__': Model.__doc__,
        })

    @property
    def database(self):
        if self.client is None:
            raise StoreNotInitialized()
        return self.client[self.database_name]

    def get_collection(self, name):
        return self.database[name]
