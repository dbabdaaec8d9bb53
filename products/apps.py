"""Products app configuration."""

from django.apps import AppConfig


class ProductsConfig(AppConfig):
    """Django app config for the catalog (products and categories)."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'products'
