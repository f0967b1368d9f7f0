"""
Shared enumerations for database models.

Account types are a closed set. The column stores the enum
value; a stored value outside this set fails loudly on read
instead of silently defaulting.
"""

import enum

from bookkeeping.exceptions import ValidationError


class AccountType(str, enum.Enum):
    """Account categories. Decide report placement and id sequence."""
    CASH = "Cash"
    CURRENT_ASSET = "CurrentAsset"
    CURRENT_LIABILITY = "CurrentLiability"
    EQUITY = "Equity"
    DIRECT_EXPENSE = "DirectExpense"
    INDIRECT_EXPENSE = "IndirectExpense"
    INVENTORY = "Inventory"
    NON_CURRENT_ASSET = "NonCurrentAsset"
    NON_CURRENT_LIABILITY = "NonCurrentLiability"
    OTHER_INCOME = "OtherIncome"
    PREPAYMENTS = "Prepayments"
    REVENUE = "Revenue"
    SYSTEM = "System"

    @classmethod
    def parse(cls, value: "str | AccountType") -> "AccountType":
        """
        Parse an incoming account type.

        Only the exact value is accepted ("CurrentAsset"), with no
        case folding or prefix matching.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"unknown account type '{value}'") from None

    @property
    def sequence_setting(self) -> str:
        """Name of the setting holding the next auto-allocated id."""
        return f"nextAccount{self.value}"
