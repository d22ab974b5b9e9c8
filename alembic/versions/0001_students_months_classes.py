"""students, months and classes

Revision ID: 0001
Revises:
Create Date: 2026-10-19 10:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

timetable = sa.Enum("TEN", "SIXTEEN", "EIGHTEEN", name="timetable")


def upgrade() -> None:
    op.create_table(
        "students",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("birthday", sa.Date(), nullable=True),
        sa.Column("telephone", sa.String(), nullable=True),
        sa.Column("day", sa.String(), nullable=True),
        sa.Column("timetable", timetable, nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_students_id", "students", ["id"])

    op.create_table(
        "months",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("label", sa.String(), nullable=False),
        sa.Column("student_id", sa.Integer(), sa.ForeignKey("students.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_months_id", "months", ["id"])
    op.create_index("ix_months_student_id", "months", ["student_id"])

    op.create_table(
        "classes",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("class_name", sa.String(), nullable=False),
        sa.Column("class_day", sa.DateTime(), nullable=True),
        sa.Column("class_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("class_paid", sa.Boolean(), nullable=False),
        sa.Column("assistance", sa.Boolean(), nullable=False),
        sa.Column("oven_name", sa.String(), nullable=True),
        sa.Column("oven_price", sa.Numeric(10, 2), nullable=True),
        sa.Column("oven_paid", sa.Boolean(), nullable=False),
        sa.Column("material_name", sa.String(), nullable=True),
        sa.Column("material_price", sa.Numeric(10, 2), nullable=True),
        sa.Column("material_paid", sa.Boolean(), nullable=False),
        sa.Column("month_id", sa.Integer(), sa.ForeignKey("months.id"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index("ix_classes_id", "classes", ["id"])
    op.create_index("ix_classes_month_id", "classes", ["month_id"])


def downgrade() -> None:
    op.drop_table("classes")
    op.drop_table("months")
    op.drop_table("students")
    timetable.drop(op.get_bind(), checkfirst=True)
