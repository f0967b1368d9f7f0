"""
Report service: financial statements from account balances.

build_balance_sheet is a pure function over account summaries;
ReportService only gathers its inputs from the database.
"""

from collections.abc import Callable, Iterable

from sqlalchemy.orm import Session

from bookkeeping.models.enums import AccountType
from bookkeeping.schemas.account import AccountSummary
from bookkeeping.schemas.report import BalanceSheetReport
from bookkeeping.services.balance_service import BalanceService
from bookkeeping.services.setting_service import (
    ENTITY_NAME_SETTING,
    SettingService,
)

CASH_TYPES = frozenset({AccountType.CASH})

# Listed under current assets. Cash has its own section above.
OTHER_CURRENT_ASSET_TYPES = frozenset({
    AccountType.CURRENT_ASSET,
    AccountType.INVENTORY,
    AccountType.PREPAYMENTS,
})

# Cash is part of the current asset total as well as the cash total.
CURRENT_ASSET_TYPES = CASH_TYPES | OTHER_CURRENT_ASSET_TYPES

CURRENT_LIABILITY_TYPES = frozenset({AccountType.CURRENT_LIABILITY})


def _select(
    accounts: Iterable[AccountSummary],
    predicate: Callable[[AccountSummary], bool],
) -> list[AccountSummary]:
    return [a for a in accounts if predicate(a)]


def _total(accounts: Iterable[AccountSummary], types: frozenset) -> int:
    return sum(a.balance for a in accounts if a.account_type in types)


def build_balance_sheet(
    accounts: list[AccountSummary], entity_name: str
) -> BalanceSheetReport:
    """
    Group account balances into balance sheet sections.

    Liabilities carry negative balances, so net assets is the
    current asset total plus the current liability total.
    """
    total_current_assets = _total(accounts, CURRENT_ASSET_TYPES)
    total_current_liabilities = _total(accounts, CURRENT_LIABILITY_TYPES)

    return BalanceSheetReport(
        entity_name=entity_name,
        timestamp=accounts[0].timestamp if accounts else None,
        cash=_select(accounts, lambda a: a.account_type in CASH_TYPES),
        total_cash=_total(accounts, CASH_TYPES),
        current_assets=_select(
            accounts, lambda a: a.account_type in OTHER_CURRENT_ASSET_TYPES
        ),
        total_current_assets=total_current_assets,
        current_liabilities=_select(
            accounts, lambda a: a.account_type in CURRENT_LIABILITY_TYPES
        ),
        total_current_liabilities=total_current_liabilities,
        net_assets=total_current_assets + total_current_liabilities,
    )


class ReportService:

    def __init__(self, db: Session):
        self.db = db
        self.balance_service = BalanceService(db)
        self.setting_service = SettingService(db)

    def balance_sheet(self) -> BalanceSheetReport:
        """Build the balance sheet for the current state of the books."""
        entity_name = self.setting_service.get_str(ENTITY_NAME_SETTING)
        accounts = self.balance_service.list_accounts()
        return build_balance_sheet(accounts, entity_name)
