"""Abstract model bases shared across apps."""

from django.db import models

from .slugs import unique_slug


class SluggedModel(models.Model):
    """Fills ``slug`` from ``slug_source`` the first time the row is saved.

    Renaming later keeps the existing slug; an explicit slug can still be set.
    """

    slug_source = 'name'

    class Meta:
        abstract = True

    def save(self, *args, **kwargs):
        if not self.slug:
            self.slug = unique_slug(type(self), getattr(self, self.slug_source), exclude_pk=self.pk)
        super().save(*args, **kwargs)
