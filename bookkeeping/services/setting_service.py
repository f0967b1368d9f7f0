"""
Setting service: the keyed scalar store.

Settings hold the next auto-allocated account id per account
type and the entity display name. Writes only flush; the
caller owns the transaction.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookkeeping.exceptions import NotFoundError, StorageError
from bookkeeping.models.account import Account
from bookkeeping.models.enums import AccountType
from bookkeeping.models.setting import Setting

logger = logging.getLogger(__name__)

ENTITY_NAME_SETTING = "entityName"

# Asset accounts 100-199, liabilities 200-299, equity 300-399,
# revenue 400-499, expenses 500-599, system 900+.
DEFAULT_ACCOUNT_SEQUENCES: dict[AccountType, int] = {
    AccountType.CASH: 101,
    AccountType.CURRENT_ASSET: 120,
    AccountType.INVENTORY: 140,
    AccountType.PREPAYMENTS: 160,
    AccountType.NON_CURRENT_ASSET: 180,
    AccountType.CURRENT_LIABILITY: 200,
    AccountType.NON_CURRENT_LIABILITY: 280,
    AccountType.EQUITY: 300,
    AccountType.REVENUE: 400,
    AccountType.OTHER_INCOME: 480,
    AccountType.DIRECT_EXPENSE: 500,
    AccountType.INDIRECT_EXPENSE: 550,
    AccountType.SYSTEM: 900,
}

# Accounts every new set of books starts with: (id, name, type)
DEFAULT_ACCOUNTS = [
    (100, "Cash", AccountType.CASH),
]


class SettingService:

    def __init__(self, db: Session):
        self.db = db

    def _get(self, name: str) -> Setting | None:
        try:
            return self.db.execute(
                select(Setting).where(Setting.name == name)
            ).scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    def get_int(self, name: str) -> int:
        """Return an integer setting. Raises NotFoundError if unset."""
        setting = self._get(name)
        if setting is None or setting.int_value is None:
            raise NotFoundError(f"Setting '{name}' not found")
        return setting.int_value

    def get_str(self, name: str) -> str:
        """Return a string setting. Raises NotFoundError if unset."""
        setting = self._get(name)
        if setting is None or setting.str_value is None:
            raise NotFoundError(f"Setting '{name}' not found")
        return setting.str_value

    def set_int(self, name: str, value: int) -> None:
        setting = self._get(name)
        if setting is None:
            setting = Setting(name=name)
            self.db.add(setting)
        setting.int_value = value
        self.db.flush()

    def set_str(self, name: str, value: str) -> None:
        setting = self._get(name)
        if setting is None:
            setting = Setting(name=name)
            self.db.add(setting)
        setting.str_value = value
        self.db.flush()

    def seed_defaults(self, entity_name: str) -> None:
        """
        Insert the default sequences, entity name and opening chart.

        Existing rows are left alone, so this is safe to run
        against books that are already in use.
        """
        for account_type, next_id in DEFAULT_ACCOUNT_SEQUENCES.items():
            if self._get(account_type.sequence_setting) is None:
                self.set_int(account_type.sequence_setting, next_id)

        if self._get(ENTITY_NAME_SETTING) is None:
            self.set_str(ENTITY_NAME_SETTING, entity_name)

        for account_id, name, account_type in DEFAULT_ACCOUNTS:
            if self.db.get(Account, account_id) is None:
                self.db.add(
                    Account(id=account_id, name=name, account_type=account_type)
                )
        self.db.flush()
        logger.info("defaults_seeded")
