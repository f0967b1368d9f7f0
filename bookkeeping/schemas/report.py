"""
Pydantic schemas for financial reports.
"""

from datetime import datetime

from pydantic import BaseModel

from bookkeeping.schemas.account import AccountSummary


class BalanceSheetReport(BaseModel):
    """
    Balance sheet sections built from account balances.

    Liabilities carry negative balances, so net_assets is the
    sum of the current asset and current liability totals.
    """
    entity_name: str
    timestamp: datetime | None = None

    cash: list[AccountSummary]
    total_cash: int

    current_assets: list[AccountSummary]
    total_current_assets: int

    current_liabilities: list[AccountSummary]
    total_current_liabilities: int

    net_assets: int
