"""Render a purchase invoice as a one-page PDF with Pillow."""

from decimal import Decimal
from io import BytesIO

from PIL import Image, ImageDraw, ImageFont

from .models import CENT

# A4 at 150 dpi.
PAGE_SIZE = (1240, 1754)
MARGIN = 90
LINE_HEIGHT = 34


def _font(size):
    return ImageFont.load_default(size=size)


def _money(value):
    return f"Rs. {value:,.2f}"


def render_invoice_pdf(invoice) -> bytes:
    gross = invoice.gross_amount
    gst_amount = (gross * invoice.gst_percentage / Decimal('100')).quantize(CENT)
    wholesaler = invoice.wholesaler

    page = Image.new('RGB', PAGE_SIZE, 'white')
    draw = ImageDraw.Draw(page)
    title_font, body_font = _font(40), _font(24)

    y = MARGIN
    draw.text((MARGIN, y), 'PURCHASE INVOICE', fill='black', font=title_font)
    y += 80

    header = [
        f"Invoice number: {invoice.invoice_number}",
        f"Purchase date: {invoice.purchase_date:%d/%m/%Y}",
        f"Financial year: {invoice.financial_year}",
    ]
    if wholesaler is not None:
        header += [
            '',
            f"Wholesaler: {wholesaler.name}",
            f"City: {wholesaler.city}",
            f"GST number: {wholesaler.gst_number or '-'}",
            f"Contact: {', '.join(wholesaler.contact_numbers) or '-'}",
            f"Address: {wholesaler.address or '-'}",
        ]
    for line in header:
        draw.text((MARGIN, y), line, fill='black', font=body_font)
        y += LINE_HEIGHT

    y += LINE_HEIGHT
    draw.line((MARGIN, y, PAGE_SIZE[0] - MARGIN, y), fill='black', width=2)
    y += LINE_HEIGHT // 2

    rows = [
        ('Gross amount', _money(gross)),
        (f"GST ({invoice.gst_percentage}%)", _money(gst_amount)),
        ('Other cost', _money(invoice.other_cost)),
        ('Discount', f"- {_money(invoice.discount)}"),
        ('Total amount', _money(invoice.total_amount)),
    ]
    amount_x = PAGE_SIZE[0] - MARGIN - 320
    for label, amount in rows:
        draw.text((MARGIN, y), label, fill='black', font=body_font)
        draw.text((amount_x, y), amount, fill='black', font=body_font)
        y += LINE_HEIGHT

    if invoice.description:
        y += LINE_HEIGHT
        draw.text((MARGIN, y), f"Notes: {invoice.description}", fill='black', font=body_font)

    buffer = BytesIO()
    page.save(buffer, format='PDF', resolution=150.0)
    return buffer.getvalue()
