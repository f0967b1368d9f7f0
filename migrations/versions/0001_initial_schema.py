"""initial schema

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

from bookkeeping.config import get_settings
from bookkeeping.models.enums import AccountType
from bookkeeping.services.setting_service import (
    DEFAULT_ACCOUNTS,
    DEFAULT_ACCOUNT_SEQUENCES,
    ENTITY_NAME_SETTING,
)

# revision identifiers, used by Alembic.
revision: str = "0001_initial_schema"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

account_type_enum = sa.Enum(
    *[t.value for t in AccountType], name="account_type_enum"
)


def upgrade() -> None:
    settings_table = op.create_table(
        "settings",
        sa.Column("name", sa.String(length=100), primary_key=True),
        sa.Column("int_value", sa.BigInteger(), nullable=True),
        sa.Column("str_value", sa.String(length=255), nullable=True),
    )
    accounts_table = op.create_table(
        "accounts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(length=140), nullable=False),
        sa.Column("type", account_type_enum, nullable=False),
    )
    op.create_table(
        "batches",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("date", sa.Date(), nullable=False),
    )
    op.create_table(
        "journals",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("batch_id", sa.Integer(), sa.ForeignKey("batches.id"), nullable=False),
        sa.Column("narrative", sa.String(length=140), nullable=False),
    )
    op.create_index("ix_journals_batch_id", "journals", ["batch_id"])
    op.create_table(
        "entries",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("journal_id", sa.Integer(), sa.ForeignKey("journals.id"), nullable=False),
        sa.Column("account_id", sa.Integer(), sa.ForeignKey("accounts.id"), nullable=False),
        sa.Column("amount", sa.BigInteger(), nullable=False),
    )
    op.create_index("ix_entries_journal_id", "entries", ["journal_id"])
    op.create_index("ix_entries_account_id", "entries", ["account_id"])

    # Seed the id sequences, the entity name and the opening chart
    op.bulk_insert(
        settings_table,
        [
            {"name": t.sequence_setting, "int_value": next_id}
            for t, next_id in DEFAULT_ACCOUNT_SEQUENCES.items()
        ]
        + [{"name": ENTITY_NAME_SETTING, "str_value": get_settings().ENTITY_NAME}],
    )
    op.bulk_insert(
        accounts_table,
        [
            {"id": account_id, "name": name, "type": account_type.value}
            for account_id, name, account_type in DEFAULT_ACCOUNTS
        ],
    )


def downgrade() -> None:
    op.drop_index("ix_entries_account_id", table_name="entries")
    op.drop_index("ix_entries_journal_id", table_name="entries")
    op.drop_table("entries")
    op.drop_index("ix_journals_batch_id", table_name="journals")
    op.drop_table("journals")
    op.drop_table("batches")
    op.drop_table("accounts")
    op.drop_table("settings")
    account_type_enum.drop(op.get_bind(), checkfirst=True)
