"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from bookkeeping.models.base import Base
from bookkeeping.models.enums import AccountType
from bookkeeping.models.setting import Setting
from bookkeeping.models.account import Account
from bookkeeping.models.batch import Batch
from bookkeeping.models.journal import Journal
from bookkeeping.models.entry import Entry

__all__ = [
    "Base",
    "AccountType",
    "Setting",
    "Account",
    "Batch",
    "Journal",
    "Entry",
]
