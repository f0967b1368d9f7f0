"""
Ledger service: the posting engine.

This service enforces the fundamental rules:
1. Every journal must balance (its amounts sum to zero)
2. Narratives are at most 140 characters
3. Entries may only reference existing accounts
4. A batch is written all at once or not at all

Every check runs before the first write. No other service
writes batches, journals or entries.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from bookkeeping.exceptions import (
    BalanceError,
    NotFoundError,
    ValidationError,
)
from bookkeeping.models.account import Account
from bookkeeping.models.base import atomic, storage_errors
from bookkeeping.models.batch import Batch
from bookkeeping.models.entry import Entry, MAX_AMOUNT, MIN_AMOUNT
from bookkeeping.models.journal import Journal, MAX_NARRATIVE_LENGTH
from bookkeeping.schemas.ledger import JournalCreate

logger = logging.getLogger(__name__)


def validate_journal(journal: JournalCreate) -> None:
    """
    Check one journal in isolation.

    Balance is checked per journal, never across a batch: two
    journals that each balance form a valid batch whether or not
    they are related.
    """
    if len(journal.narrative) > MAX_NARRATIVE_LENGTH:
        raise ValidationError("narrative too long")

    for entry in journal.entries:
        if not MIN_AMOUNT <= entry.amount <= MAX_AMOUNT:
            raise ValidationError("amount out of range")

    total = journal.total
    if total != 0:
        raise BalanceError("journal does not balance", total=total)


class LedgerService:
    """
    All ledger writes pass through this service.

    Unlike read services, post_batch owns its transaction: it
    commits on success and rolls back on any failure, so no
    partial batch is ever visible.
    """

    def __init__(self, db: Session):
        self.db = db

    def _check_accounts_exist(self, journals: list[JournalCreate]) -> None:
        account_ids = {
            entry.account_id
            for journal in journals
            for entry in journal.entries
        }
        if not account_ids:
            return

        with storage_errors():
            found = set(self.db.execute(
                select(Account.id).where(Account.id.in_(account_ids))
            ).scalars().all())

        missing = account_ids - found
        if missing:
            raise NotFoundError(f"Accounts not found: {sorted(missing)}")

    def post_batch(self, journals: list[JournalCreate]) -> tuple[int, list[int]]:
        """
        Validate and commit several journals as one batch.

        Returns the batch id and the journal ids in input order.
        A single invalid journal rejects the whole batch before
        anything is written.
        """
        if not journals:
            raise ValidationError("batch contains no journals")

        for journal in journals:
            validate_journal(journal)

        self._check_accounts_exist(journals)

        journal_ids = []
        entry_count = 0
        with atomic(self.db):
            batch = Batch()
            self.db.add(batch)
            self.db.flush()

            for journal_data in journals:
                journal = Journal(
                    batch_id=batch.id,
                    narrative=journal_data.narrative,
                )
                self.db.add(journal)
                self.db.flush()

                for entry_data in journal_data.entries:
                    self.db.add(Entry(
                        journal_id=journal.id,
                        account_id=entry_data.account_id,
                        amount=entry_data.amount,
                    ))
                    # Flush per entry to keep the insert order
                    self.db.flush()
                    entry_count += 1

                journal_ids.append(journal.id)

            batch_id = batch.id

        logger.info(
            "batch_posted",
            extra={
                "batch_id": batch_id,
                "journal_ids": journal_ids,
                "entry_count": entry_count,
            },
        )
        return batch_id, journal_ids

    def post_journal(self, journal: JournalCreate) -> int:
        """Post a single journal in its own batch and return its id."""
        _, journal_ids = self.post_batch([journal])
        return journal_ids[0]

    def get_batch(self, batch_id: int) -> Batch:
        """Get a posted batch with its journals."""
        with storage_errors():
            batch = self.db.get(Batch, batch_id)
        if not batch:
            raise NotFoundError(f"Batch {batch_id} not found")
        return batch

    def get_entries_by_journal(self, journal_id: int) -> list[Entry]:
        """Return the entries of a journal in the order they were posted."""
        with storage_errors():
            entries = self.db.execute(
                select(Entry)
                .where(Entry.journal_id == journal_id)
                .order_by(Entry.id)
            ).scalars().all()
        return list(entries)
