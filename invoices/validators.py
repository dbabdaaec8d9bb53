"""Validation rules for wholesaler payloads."""

import re

EMAIL_RE = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')
PINCODE_RE = re.compile(r'^[0-9]{5,6}$')

# Column limits; reported only after the field rules below.
MAX_LENGTHS = {
    'name': 255,
    'gst_number': 20,
    'area': 255,
    'city': 255,
    'state': 255,
    'email': 254,
    'website': 500,
}
FIELD_LABELS = {
    'name': 'Wholesaler name',
    'gst_number': 'GST number',
    'area': 'Area',
    'city': 'City',
    'state': 'State',
    'email': 'Email',
    'website': 'Website',
}


def _blank(value):
    return value is None or str(value).strip() == ''


def validate_wholesaler(data):
    """Return the rule violations for ``data``, in rule order.

    Each entry is ``{'field': ..., 'message': ...}``; an empty list means valid.
    Callers report only the first entry.
    """
    errors = []

    if _blank(data.get('name')):
        errors.append({'field': 'name', 'message': 'Wholesaler name is required'})
    if _blank(data.get('area')):
        errors.append({'field': 'area', 'message': 'Area is required'})
    if _blank(data.get('city')):
        errors.append({'field': 'city', 'message': 'City is required'})

    email = data.get('email')
    if not _blank(email) and not EMAIL_RE.match(str(email)):
        errors.append({'field': 'email', 'message': 'Please enter a valid email address'})

    pincode = data.get('pincode')
    if not _blank(pincode) and not PINCODE_RE.match(str(pincode).strip()):
        errors.append({'field': 'pincode', 'message': 'Pincode must be 5-6 digits'})

    for field, limit in MAX_LENGTHS.items():
        value = data.get(field)
        if value is not None and len(str(value).strip()) > limit:
            errors.append({'field': field, 'message': f'{FIELD_LABELS[field]} must be at most {limit} characters'})

    return errors
