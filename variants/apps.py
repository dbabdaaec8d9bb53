"""Variants app configuration."""

from django.apps import AppConfig


class VariantsConfig(AppConfig):
    """Django app config for the garment variant kinds."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'variants'
