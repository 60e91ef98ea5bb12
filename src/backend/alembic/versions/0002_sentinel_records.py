"""Revision 0002: normalise and flag the Reserve / Unemployed sentinel rows

Data imported from earlier deployments names the fallback rows inconsistently
("Резерв", "Global Reserve", "Unassigned"; "Без Посади"). This revision
renames them once, flags exactly one row of each kind, creates the rows if
none exist, and points employees with no department or position at them.
At runtime the application matches the flags only.

Revision ID: 0002
Revises: 0001
Create Date: 2026-01-18
"""
import sqlalchemy as sa

from alembic import op

revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None

RESERVE_NAME = "Reserve"
RESERVE_SYNONYMS = ("Резерв", "Global Reserve", "Unassigned")
UNEMPLOYED_TITLE = "Unemployed"
UNEMPLOYED_SYNONYMS = ("Без Посади",)


def upgrade() -> None:
    conn = op.get_bind()

    conn.execute(
        sa.text("UPDATE departments SET name = :name WHERE name IN :synonyms").bindparams(
            sa.bindparam("synonyms", expanding=True)
        ),
        {"name": RESERVE_NAME, "synonyms": list(RESERVE_SYNONYMS)},
    )
    conn.execute(
        sa.text(
            "UPDATE departments SET is_reserve = true WHERE id = ("
            " SELECT id FROM departments WHERE name = :name ORDER BY id LIMIT 1)"
            " AND NOT EXISTS (SELECT 1 FROM departments WHERE is_reserve)"
        ),
        {"name": RESERVE_NAME},
    )
    conn.execute(
        sa.text(
            "INSERT INTO departments (name, is_reserve) VALUES (:name, true)"
            " ON CONFLICT (is_reserve) WHERE is_reserve DO NOTHING"
        ),
        {"name": RESERVE_NAME},
    )

    conn.execute(
        sa.text("UPDATE positions SET title = :title WHERE title IN :synonyms").bindparams(
            sa.bindparam("synonyms", expanding=True)
        ),
        {"title": UNEMPLOYED_TITLE, "synonyms": list(UNEMPLOYED_SYNONYMS)},
    )
    conn.execute(
        sa.text(
            "UPDATE positions SET is_unemployed = true WHERE id = ("
            " SELECT id FROM positions WHERE title = :title ORDER BY id LIMIT 1)"
            " AND NOT EXISTS (SELECT 1 FROM positions WHERE is_unemployed)"
        ),
        {"title": UNEMPLOYED_TITLE},
    )
    conn.execute(
        sa.text(
            "INSERT INTO positions (title, is_unemployed) VALUES (:title, true)"
            " ON CONFLICT (is_unemployed) WHERE is_unemployed DO NOTHING"
        ),
        {"title": UNEMPLOYED_TITLE},
    )

    op.execute(
        "UPDATE employees SET department_id = (SELECT id FROM departments WHERE is_reserve)"
        " WHERE department_id IS NULL"
    )
    op.execute(
        "UPDATE employees SET position_id = (SELECT id FROM positions WHERE is_unemployed)"
        " WHERE position_id IS NULL"
    )


def downgrade() -> None:
    # Renames and backfills are one-way; only the flags are cleared.
    op.execute("UPDATE departments SET is_reserve = false WHERE is_reserve")
    op.execute("UPDATE positions SET is_unemployed = false WHERE is_unemployed")
