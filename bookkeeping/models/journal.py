"""
Journal model.

A journal is a narrated group of entries whose amounts sum to
zero. It belongs to exactly one batch and is never modified
after the batch commits.
"""

from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from bookkeeping.models.base import Base

MAX_NARRATIVE_LENGTH = 140


class Journal(Base):
    __tablename__ = "journals"

    id: Mapped[int] = mapped_column(primary_key=True)
    batch_id: Mapped[int] = mapped_column(
        ForeignKey("batches.id"), nullable=False, index=True
    )
    narrative: Mapped[str] = mapped_column(
        String(MAX_NARRATIVE_LENGTH), nullable=False, default=""
    )

    batch: Mapped["Batch"] = relationship(back_populates="journals")
    entries: Mapped[list["Entry"]] = relationship(
        back_populates="journal", order_by="Entry.id"
    )

    def __repr__(self) -> str:
        return f"<Journal {self.id} batch={self.batch_id}>"
