"""Sequential invoice numbers per financial year (``Y24001``, ``Y24002``, ...)."""

import logging
import re

from .models import Invoice

logger = logging.getLogger(__name__)


def financial_year_prefix(financial_year: str) -> str:
    """``"2024-25"`` -> ``"Y24"``."""
    first_year = str(financial_year).split('-')[0].strip()
    return f"Y{first_year[-2:]}"


def next_invoice_number(financial_year: str) -> str:
    prefix = financial_year_prefix(financial_year)
    pattern = re.compile(rf'^{re.escape(prefix)}(\d+)$')

    existing = Invoice.objects.filter(
        financial_year=financial_year,
        invoice_number__startswith=prefix,
    ).values_list('invoice_number', flat=True)

    numbers = [int(m.group(1)) for m in map(pattern.match, existing) if m]
    number = f"{prefix}{max(numbers, default=0) + 1:03d}"
    logger.info('Generated invoice number %s for %s', number, financial_year)
    return number
