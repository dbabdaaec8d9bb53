"""Marketing app configuration."""

from django.apps import AppConfig


class MarketingConfig(AppConfig):
    """Banners, testimonials, blog posts and discount coupons."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'marketing'
