"""Initial schema: people, astronaut_details, astronaut_duties.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "people",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.UniqueConstraint("name", name="uq_people_name"),
    )

    op.create_table(
        "astronaut_details",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "person_id", sa.Integer,
            sa.ForeignKey("people.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("current_rank", sa.String(100), nullable=False),
        sa.Column("current_duty_title", sa.String(200), nullable=False),
        sa.Column("career_start_date", sa.Date, nullable=False),
        sa.Column("career_end_date", sa.Date, nullable=True),
        sa.UniqueConstraint("person_id", name="uq_astronaut_details_person_id"),
    )

    op.create_table(
        "astronaut_duties",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "person_id", sa.Integer,
            sa.ForeignKey("people.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("rank", sa.String(100), nullable=False),
        sa.Column("duty_title", sa.String(200), nullable=False),
        sa.Column("duty_start_date", sa.Date, nullable=False),
        sa.Column("duty_end_date", sa.Date, nullable=True),
        sa.UniqueConstraint(
            "person_id", "duty_title", "duty_start_date",
            name="uq_astronaut_duties_person_title_start",
        ),
    )
    op.create_index(
        "ix_astronaut_duties_person_start",
        "astronaut_duties", ["person_id", "duty_start_date"],
    )


def downgrade() -> None:
    op.drop_index("ix_astronaut_duties_person_start", table_name="astronaut_duties")
    op.drop_table("astronaut_duties")
    op.drop_table("astronaut_details")
    op.drop_table("people")
