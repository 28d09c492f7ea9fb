"""Initialise the Flask app."""
import logging
import sys

from flask import Flask

import findorcreate.settings
from findorcreate.store import DocumentStore

store = DocumentStore()
logger = logging.getLogger('findorcreate')


LOG_FORMAT = '[%(asctime)s][%(levelname)s][PID-%(process)d][%(threadName)s] %(message)s'


def init_store(app, client=None):
    """Bind the document store, optionally to an existing client."""
    store.init_app(app, client=client)


def init_logging(app):
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger = logging.getLogger()
    root_logger.addHandler(handler)
    root_logger.setLevel(app.config['LOG_LEVEL'])


def create_app(client=None):
    """Create and configure an instance of the Flask application."""
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(findorcreate.settings)

    init_logging(app)
    init_store(app, client)

    return app
