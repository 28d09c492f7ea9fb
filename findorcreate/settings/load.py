"""Load settings from a configuration file."""

import configparser
import os


CONFIG_PATH = os.path.join(os.path.expanduser('~'), '.findorcreate.conf')
DEVELOPER_PATH = os.path.join(os.path.dirname(__file__), 'developer.conf')
TESTING_PATH = os.path.join(os.path.dirname(__file__), 'testing.conf')


def load_config(settings, testing=False):
    """Load configuration."""
    config = configparser.ConfigParser()
    path = CONFIG_PATH
    config_parsed = config.read([path])
    if not config_parsed:
        path = DEVELOPER_PATH
        config = configparser.ConfigParser()
    if testing:
        path = TESTING_PATH
        config = configparser.ConfigParser()
    with open(path) as config_file:
        config.read_file(config_file)
    settings.MONGO_URI = os.environ.get(
        'MONGO_URI', config.get('mongo', 'MONGO_URI'))
    settings.MONGO_DATABASE = config.get('mongo', 'MONGO_DATABASE')
    settings.MONGO_CONNECT_TIMEOUT_MS = config.getint(
        'mongo', 'MONGO_CONNECT_TIMEOUT_MS')

    settings.FIND_OR_CREATE_NEW = config.getboolean('find_or_create', 'NEW')
    settings.FIND_OR_CREATE_SET_DEFAULTS_ON_INSERT = config.getboolean(
        'find_or_create', 'SET_DEFAULTS_ON_INSERT')

    settings.LOG_LEVEL = config.get('flask', 'LOG_LEVEL')
    return path
