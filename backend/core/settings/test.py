"""
Settings used by the test suite.
"""
from core.settings.base import *  # noqa: F401,F403
from core.settings.base import LOGGING

DEBUG = False

ALLOWED_HOSTS = ['testserver', 'localhost']

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

STORAGES = {
    'staticfiles': {
        'BACKEND': 'django.contrib.staticfiles.storage.StaticFilesStorage',
    },
}

# Keep test output quiet
LOGGING = {
    **LOGGING,
    'root': {'handlers': ['null'], 'level': 'CRITICAL'},
    'loggers': {
        name: {**config, 'handlers': ['null']}
        for name, config in LOGGING['loggers'].items()
    },
}
