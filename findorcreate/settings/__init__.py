"""Package for loading system settings."""

import os
import sys

from findorcreate.settings.load import load_config

_TEST_PROGRAMS = ("pytest", "setup.py")

TESTING = False
if any(name in sys.argv[0] for name in _TEST_PROGRAMS):
    TESTING = True
elif "TESTING" in os.environ:
    TESTING = True

MONGO_URI = None
MONGO_DATABASE = None
MONGO_CONNECT_TIMEOUT_MS = None

FIND_OR_CREATE_NEW = None
FIND_OR_CREATE_SET_DEFAULTS_ON_INSERT = None

LOG_LEVEL = None

load_config(sys.modules[__name__], testing=TESTING)
