"""Revision 0001: pgcrypto extension + departments, positions, employees, equipment

Creates the core schema. Sentinel flags (is_reserve / is_unemployed) are
protected by partial unique indexes so at most one row of each can exist.

Revision ID: 0001
Create Date: 2026-01-17
"""
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def _id_column() -> sa.Column:
    return sa.Column(
        "id",
        postgresql.UUID(as_uuid=False),
        server_default=sa.text("gen_random_uuid()"),
        nullable=False,
    )


def upgrade() -> None:
    op.execute("CREATE EXTENSION IF NOT EXISTS pgcrypto")

    op.create_table(
        "departments",
        _id_column(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("is_reserve", sa.Boolean(), server_default=sa.text("false"), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_departments"),
    )
    op.create_index(
        "uq_departments_reserve",
        "departments",
        ["is_reserve"],
        unique=True,
        postgresql_where=sa.text("is_reserve"),
    )

    op.create_table(
        "positions",
        _id_column(),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column(
            "is_unemployed", sa.Boolean(), server_default=sa.text("false"), nullable=False
        ),
        sa.PrimaryKeyConstraint("id", name="pk_positions"),
    )
    op.create_index(
        "uq_positions_unemployed",
        "positions",
        ["is_unemployed"],
        unique=True,
        postgresql_where=sa.text("is_unemployed"),
    )

    op.create_table(
        "department_positions",
        sa.Column("department_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("position_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.ForeignKeyConstraint(["department_id"], ["departments.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(["position_id"], ["positions.id"], ondelete="RESTRICT"),
        sa.PrimaryKeyConstraint("department_id", "position_id", name="pk_department_positions"),
    )

    op.create_table(
        "specializations",
        _id_column(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_specializations"),
    )

    op.create_table(
        "equipment_categories",
        _id_column(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_equipment_categories"),
    )

    op.create_table(
        "employees",
        _id_column(),
        sa.Column("first_name", sa.Text(), nullable=True),
        sa.Column("last_name", sa.Text(), nullable=True),
        sa.Column("call_sign", sa.Text(), nullable=False),
        sa.Column("phone_number", sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.Column("birth_date", sa.Date(), nullable=True),
        sa.Column(
            "hire_date",
            postgresql.TIMESTAMP(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column("department_id", postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column("position_id", postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column("specialization_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.ForeignKeyConstraint(["department_id"], ["departments.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["position_id"], ["positions.id"], ondelete="RESTRICT"),
        sa.ForeignKeyConstraint(
            ["specialization_id"], ["specializations.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_employees"),
    )
    op.create_index("ix_employees_department_id", "employees", ["department_id"])
    op.create_index("ix_employees_position_id", "employees", ["position_id"])

    op.create_table(
        "equipment",
        _id_column(),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), server_default=sa.text("''"), nullable=False),
        sa.Column("serial_number", sa.Text(), nullable=True),
        sa.Column("purchase_date", postgresql.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("status", sa.Text(), server_default=sa.text("'Used'"), nullable=False),
        sa.Column("measurement", sa.Text(), server_default=sa.text("'Unit'"), nullable=False),
        sa.Column("amount", sa.Numeric(18, 2), server_default=sa.text("1"), nullable=False),
        sa.Column("department_id", postgresql.UUID(as_uuid=False), nullable=True),
        sa.Column("category_id", postgresql.UUID(as_uuid=False), nullable=False),
        sa.Column("responsible_employee_id", postgresql.UUID(as_uuid=False), nullable=True),
        sa.ForeignKeyConstraint(["department_id"], ["departments.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(
            ["category_id"], ["equipment_categories.id"], ondelete="RESTRICT"
        ),
        sa.ForeignKeyConstraint(
            ["responsible_employee_id"], ["employees.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id", name="pk_equipment"),
    )
    op.create_index("ix_equipment_department_id", "equipment", ["department_id"])


def downgrade() -> None:
    op.drop_index("ix_equipment_department_id", table_name="equipment")
    op.drop_table("equipment")
    op.drop_index("ix_employees_position_id", table_name="employees")
    op.drop_index("ix_employees_department_id", table_name="employees")
    op.drop_table("employees")
    op.drop_table("equipment_categories")
    op.drop_table("specializations")
    op.drop_table("department_positions")
    op.drop_index("uq_positions_unemployed", table_name="positions")
    op.drop_table("positions")
    op.drop_index("uq_departments_reserve", table_name="departments")
    op.drop_table("departments")
    op.execute("DROP EXTENSION IF EXISTS pgcrypto")
