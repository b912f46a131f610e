"""
Local development settings.
"""
from core.settings.base import *  # noqa: F401,F403

DEBUG = True

ALLOWED_HOSTS = ['localhost', '127.0.0.1', '[::1]']

CORS_ALLOW_ALL_ORIGINS = True
