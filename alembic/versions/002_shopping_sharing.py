"""Shopping list sharing: share edges and the audit log.

Revision ID: 002
Revises: 001
Create Date: 2025-02-14

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "shopping_shares",
        sa.Column("id", sa.String(64), nullable=False),
        sa.Column("owner_id", sa.String(64), nullable=False),
        sa.Column("shared_with_id", sa.String(64), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["shared_with_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("owner_id", "shared_with_id", name="uq_shopping_shares_pair"),
    )
    op.create_index(op.f("ix_shopping_shares_owner_id"), "shopping_shares", ["owner_id"], unique=False)
    op.create_index(
        op.f("ix_shopping_shares_shared_with_id"), "shopping_shares", ["shared_with_id"], unique=False
    )

    op.create_table(
        "shopping_audit",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.String(64), nullable=False),
        sa.Column("action", sa.String(16), nullable=False),
        sa.Column("item_name", sa.String(255), nullable=False),
        sa.Column("details", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_shopping_audit_user_id"), "shopping_audit", ["user_id"], unique=False)
    op.create_index(op.f("ix_shopping_audit_created_at"), "shopping_audit", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_shopping_audit_created_at"), table_name="shopping_audit")
    op.drop_index(op.f("ix_shopping_audit_user_id"), table_name="shopping_audit")
    op.drop_table("shopping_audit")
    op.drop_index(op.f("ix_shopping_shares_shared_with_id"), table_name="shopping_shares")
    op.drop_index(op.f("ix_shopping_shares_owner_id"), table_name="shopping_shares")
    op.drop_table("shopping_shares")
