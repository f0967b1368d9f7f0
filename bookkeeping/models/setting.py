"""
Setting model.

A keyed store of scalar values. Holds the next auto-allocated
account id for every account type and the entity display name.
"""

from sqlalchemy import BigInteger, String
from sqlalchemy.orm import Mapped, mapped_column

from bookkeeping.models.base import Base


class Setting(Base):
    __tablename__ = "settings"

    name: Mapped[str] = mapped_column(String(100), primary_key=True)
    int_value: Mapped[int | None] = mapped_column(BigInteger, nullable=True)
    str_value: Mapped[str | None] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        value = self.int_value if self.int_value is not None else self.str_value
        return f"<Setting {self.name}={value!r}>"
