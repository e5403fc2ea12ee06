"""Create catalog tables.

Revision ID: 0001_catalog_tables
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001_catalog_tables"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "archive",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("hash", sa.String(length=32), nullable=False),
        sa.Column("variant", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_archive"),
        sa.UniqueConstraint("hash", "variant", name="uq_archive_archive_hash"),
    )
    op.create_table(
        "translation",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_translation"),
        sa.UniqueConstraint("name", name="uq_translation_translation_name"),
    )
    op.create_table(
        "file",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("archive_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.ForeignKeyConstraint(
            ["archive_id"],
            ["archive.id"],
            name="fk_file_file_archive_id_archive",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_file"),
        sa.UniqueConstraint("archive_id", "name", name="uq_file_file_archive_id"),
    )
    op.create_table(
        "source_string",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("file_id", sa.Uuid(), nullable=False),
        sa.Column("identifier", sa.String(), nullable=False),
        sa.Column("ordinal", sa.Integer(), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(
            ["file_id"],
            ["file.id"],
            name="fk_source_string_source_string_file_id_file",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_source_string"),
        sa.UniqueConstraint(
            "file_id",
            "identifier",
            "ordinal",
            name="uq_source_string_source_string_file_id",
        ),
    )
    op.create_table(
        "translation_string",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("translation_id", sa.Uuid(), nullable=False),
        sa.Column("source_string_id", sa.Uuid(), nullable=False),
        sa.Column("value", sa.Text(), nullable=False),
        sa.ForeignKeyConstraint(
            ["translation_id"],
            ["translation.id"],
            name="fk_translation_string_translation_string_translation_id_translation",
            ondelete="CASCADE",
        ),
        sa.ForeignKeyConstraint(
            ["source_string_id"],
            ["source_string.id"],
            name="fk_translation_string_translation_string_source_string_id_source_string",
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_translation_string"),
        sa.UniqueConstraint(
            "translation_id",
            "source_string_id",
            name="uq_translation_string_translation_string_translation_id",
        ),
    )


def downgrade() -> None:
    op.drop_table("translation_string")
    op.drop_table("source_string")
    op.drop_table("file")
    op.drop_table("translation")
    op.drop_table("archive")
