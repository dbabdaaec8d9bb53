"""PostgreSQL trigram index for the storefront product name search.

This migration is a no-op on non-PostgreSQL databases (e.g., SQLite).

The product lists filter with ``name__icontains`` (``ILIKE``), which a
trigram GIN index on ``name`` serves. Only live products are indexed since
the public catalog never lists anything else.
"""

from __future__ import annotations

import logging

from django.db import DatabaseError, migrations

logger = logging.getLogger(__name__)


def _is_postgres(schema_editor) -> bool:
    return getattr(schema_editor.connection, "vendor", None) == "postgresql"


def _has_extension(cursor, extname: str) -> bool:
    cursor.execute("SELECT 1 FROM pg_extension WHERE extname = %s", [extname])
    return cursor.fetchone() is not None


def forwards(apps, schema_editor):
    if not _is_postgres(schema_editor):
        return

    with schema_editor.connection.cursor() as cursor:
        if not _has_extension(cursor, "pg_trgm"):
            try:
                cursor.execute("CREATE EXTENSION IF NOT EXISTS pg_trgm")
            except DatabaseError:
                # Managed databases may refuse CREATE EXTENSION.
                logger.warning("pg_trgm unavailable; skipping trigram index on products_product.name")
                return

        cursor.execute(
            """
            CREATE INDEX CONCURRENTLY IF NOT EXISTS products_product_live_name_trgm_gin
            ON products_product
            USING GIN (name gin_trgm_ops)
            WHERE status = 'live'
            """.strip()
        )


def backwards(apps, schema_editor):
    if not _is_postgres(schema_editor):
        return

    with schema_editor.connection.cursor() as cursor:
        cursor.execute("DROP INDEX CONCURRENTLY IF EXISTS products_product_live_name_trgm_gin")


class Migration(migrations.Migration):
    atomic = False

    dependencies = [
        ("products", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(forwards, backwards),
    ]
