"""Business logic services."""

from bookkeeping.services.setting_service import SettingService
from bookkeeping.services.account_service import AccountService
from bookkeeping.services.ledger_service import LedgerService
from bookkeeping.services.balance_service import BalanceService
from bookkeeping.services.report_service import ReportService, build_balance_sheet

__all__ = [
    "SettingService",
    "AccountService",
    "LedgerService",
    "BalanceService",
    "ReportService",
    "build_balance_sheet",
]
