"""Batch moderation updates: flag products and record remark tags atomically."""
import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Sequence

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.models import Product
from src.services.remarks import encode_remarks, normalize_remarks

logger = logging.getLogger(__name__)


class ModerationValidationError(ValueError):
    """Raised when a batch is rejected before any storage access."""


@dataclass(frozen=True)
class RemarkEdit:
    """One product's new flag state and remark tags, keyed by external product_id."""

    product_id: int
    is_flagged: bool
    remarks: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_values(cls, product_id: int, is_flagged: bool, remarks: Iterable | None = None):
        return cls(
            product_id=product_id,
            is_flagged=bool(is_flagged),
            remarks=normalize_remarks(remarks),
        )


def apply_remark_batch(session: Session, edits: Sequence[RemarkEdit]) -> int:
    """Apply every edit in *edits* inside one transaction, or none of them.

    Edits whose product_id matches no product update zero rows and do not
    fail the batch. Any storage error rolls the whole batch back and is
    re-raised.

    A flagged edit without remarks rejects the whole batch before any
    statement runs.

    Returns the number of edits submitted, which can differ from the number
    of rows changed.
    """
    if not isinstance(edits, (list, tuple)) or not edits:
        raise ModerationValidationError("Products array is required")
    for edit in edits:
        if edit.is_flagged and not edit.remarks:
            raise ModerationValidationError(
                f"Product {edit.product_id} is flagged but has no valid remarks"
            )

    now = datetime.utcnow()
    matched = 0
    try:
        for edit in edits:
            result = session.execute(
                update(Product)
                .where(Product.product_id == edit.product_id)
                .values(
                    is_flagged=edit.is_flagged,
                    remarks=encode_remarks(edit.remarks),
                    updated_at=now,
                )
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                logger.debug("No product with product_id=%s; edit is a no-op", edit.product_id)
            else:
                matched += result.rowcount
        session.commit()
    except SQLAlchemyError:
        session.rollback()
        logger.exception("Remark batch of %d edit(s) rolled back", len(edits))
        raise

    logger.info("Committed remark batch: %d edit(s), %d row(s) matched", len(edits), matched)
    return len(edits)
