"""
Pydantic schemas for ledger operations.

These define the shape of journals coming in and of posted
entries going out. They are separate from the database models
because the API shape and the storage shape differ.
"""

from pydantic import BaseModel, Field


# --- Request Schemas ---

class EntryCreate(BaseModel):
    """A single signed amount. Positive debits, negative credits."""
    account_id: int
    amount: int


class JournalCreate(BaseModel):
    """
    A narrated group of entries.

    Balance and narrative length are checked by LedgerService,
    which rejects the whole batch if any journal fails.
    """
    narrative: str = ""
    entries: list[EntryCreate] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return sum(e.amount for e in self.entries)


class BatchCreate(BaseModel):
    """Several journals committed together."""
    journals: list[JournalCreate]


# --- Response Schemas ---

class EntryResponse(BaseModel):
    id: int
    journal_id: int
    account_id: int
    amount: int

    model_config = {"from_attributes": True}


class JournalCreateResponse(BaseModel):
    journal_id: int


class BatchCreateResponse(BaseModel):
    batch_id: int
    journal_ids: list[int]


class IntegrityResponse(BaseModel):
    """Totals over the whole entry log."""
    total_debits: int
    total_credits: int
    difference: int
    is_balanced: bool
