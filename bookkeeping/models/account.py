"""
Account model (chart of accounts).

Entries are posted against these accounts. An account is
created once and never updated or deleted; its balance is
always derived from the entry log.
"""

from sqlalchemy import String, Enum as SAEnum
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookkeeping.models.base import Base
from bookkeeping.models.enums import AccountType

MAX_ACCOUNT_NAME_LENGTH = 140
MIN_ACCOUNT_ID = 1
MAX_ACCOUNT_ID = 999


class Account(Base):
    __tablename__ = "accounts"

    # Ids are either chosen by the caller or drawn from the
    # per-type sequence, never generated by the database.
    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=False)
    name: Mapped[str] = mapped_column(
        String(MAX_ACCOUNT_NAME_LENGTH), nullable=False
    )
    account_type: Mapped[AccountType] = mapped_column(
        "type",
        SAEnum(
            AccountType,
            name="account_type_enum",
            values_callable=lambda members: [m.value for m in members],
        ),
        nullable=False,
    )

    entries: Mapped[list["Entry"]] = relationship(back_populates="account")

    def __repr__(self) -> str:
        return f"<Account {self.id} {self.name} ({self.account_type.value})>"
