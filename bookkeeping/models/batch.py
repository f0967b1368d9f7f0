"""
Batch model.

A batch is the unit of one posting call: every journal in it
was committed in the same database transaction.
"""

import datetime

from sqlalchemy import Date
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookkeeping.models.base import Base


def utc_today() -> datetime.date:
    return datetime.datetime.now(datetime.timezone.utc).date()


class Batch(Base):
    __tablename__ = "batches"

    id: Mapped[int] = mapped_column(primary_key=True)
    date: Mapped[datetime.date] = mapped_column(
        Date, nullable=False, default=utc_today
    )

    journals: Mapped[list["Journal"]] = relationship(
        back_populates="batch", order_by="Journal.id"
    )

    def __repr__(self) -> str:
        return f"<Batch {self.id} {self.date}>"
