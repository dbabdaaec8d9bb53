"""Slug helpers shared by every model that exposes a public slug."""

import re

_DISALLOWED = re.compile(r'[^a-z0-9\s-]')
_WHITESPACE = re.compile(r'\s+')
_HYPHENS = re.compile(r'-+')


def generate_slug(value) -> str:
    """Turn a display string into a URL-safe slug.

    Lowercases, drops anything outside ``[a-z0-9\\s-]``, turns whitespace runs
    into a single hyphen, collapses repeated hyphens and trims hyphens at both
    ends. Applying it twice gives the same result as applying it once.
    """
    text = str(value or '').lower()
    text = _DISALLOWED.sub('', text)
    text = _WHITESPACE.sub('-', text.strip())
    text = _HYPHENS.sub('-', text)
    return text.strip('-')


def unique_slug(model, value, *, exclude_pk=None, field='slug') -> str:
    """Return a slug for ``value`` that is not taken in ``model``.

    Collisions get a numeric suffix: ``red-saree``, ``red-saree-1``, ...
    """
    base = generate_slug(value) or model._meta.model_name
    candidate = base
    counter = 1
    qs = model._default_manager.all()
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    while qs.filter(**{field: candidate}).exists():
        candidate = f'{base}-{counter}'
        counter += 1
    return candidate
