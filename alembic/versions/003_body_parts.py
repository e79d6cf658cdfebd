"""User-configurable body parts; sets and reps on exercises.

Revision ID: 003
Revises: 002
Create Date: 2025-03-02

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "body_parts",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("name", sa.String(64), nullable=False),
        sa.Column("color", sa.String(16), nullable=False),
        sa.Column("sort_order", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_body_parts_user_id"), "body_parts", ["user_id"], unique=False)

    with op.batch_alter_table("exercises") as batch_op:
        batch_op.add_column(sa.Column("sets", sa.Integer(), nullable=False, server_default=sa.text("3")))
        batch_op.add_column(sa.Column("reps", sa.Integer(), nullable=False, server_default=sa.text("10")))


def downgrade() -> None:
    with op.batch_alter_table("exercises") as batch_op:
        batch_op.drop_column("reps")
        batch_op.drop_column("sets")
    op.drop_index(op.f("ix_body_parts_user_id"), table_name="body_parts")
    op.drop_table("body_parts")
