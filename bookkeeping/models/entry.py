"""
Entry model.

Each entry is a signed amount in minor currency units against
one account. Positive amounts are debits, negative amounts are
credits. Entries are append-only: once written they are never
modified or deleted, and they are the only source of balances.
"""

from sqlalchemy import BigInteger, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookkeeping.models.base import Base

# Amounts are stored as signed 64-bit integers
MIN_AMOUNT = -(2 ** 63)
MAX_AMOUNT = 2 ** 63 - 1


class Entry(Base):
    """
    An immutable debit or credit.

    Entries are grouped by journal_id. Within a journal the
    amounts sum to zero. This invariant is enforced by the
    LedgerService before anything is written, not by the model.
    """

    __tablename__ = "entries"

    id: Mapped[int] = mapped_column(primary_key=True)
    journal_id: Mapped[int] = mapped_column(
        ForeignKey("journals.id"), nullable=False, index=True
    )
    account_id: Mapped[int] = mapped_column(
        ForeignKey("accounts.id"), nullable=False, index=True
    )
    amount: Mapped[int] = mapped_column(BigInteger, nullable=False)

    journal: Mapped["Journal"] = relationship(back_populates="entries")
    account: Mapped["Account"] = relationship(back_populates="entries")

    @property
    def is_debit(self) -> bool:
        return self.amount > 0

    def __repr__(self) -> str:
        side = "DR" if self.is_debit else "CR"
        return f"<Entry {side} {abs(self.amount)} account={self.account_id}>"
