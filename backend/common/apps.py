"""
Common app configuration.
Shared hypermedia helpers, error mapping and sample data command.
"""
from django.apps import AppConfig


class CommonConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'common'
    verbose_name = 'Common'
