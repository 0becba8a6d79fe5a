"""Client-side tracking of unsaved remark edits for the products on screen."""
from dataclasses import dataclass, field
from typing import Iterable

from src.services.remarks import decode_remarks


@dataclass(frozen=True)
class PendingEdit:
    """A product's edited flag state; ``is_flagged`` always equals ``bool(remarks)``."""

    remarks: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_flagged(self) -> bool:
        return len(self.remarks) > 0

    def with_tag(self, tag: str, checked: bool) -> "PendingEdit":
        if checked:
            if tag in self.remarks:
                return self
            return PendingEdit(self.remarks + (tag,))
        return PendingEdit(tuple(r for r in self.remarks if r != tag))

    def to_dict(self) -> dict:
        return {"is_flagged": self.is_flagged, "remarks": list(self.remarks)}


_EMPTY = PendingEdit()


class RemarkTracker:
    """Pending edits keyed by product_id, scoped to the currently displayed page."""

    def __init__(self):
        self._edits: dict[int, PendingEdit] = {}
        self._dirty = False

    @property
    def has_changes(self) -> bool:
        return self._dirty

    def __len__(self) -> int:
        return len(self._edits)

    def __contains__(self, product_id) -> bool:
        return product_id in self._edits

    def seed(self, products: Iterable[dict]) -> None:
        """Replace all entries with the persisted state of *products*.

        The remarks of an unflagged product are never treated as active,
        whatever is stored.
        """
        edits = {}
        for product in products:
            remarks = decode_remarks(product.get("remarks")) if product.get("is_flagged") else ()
            edits[product["product_id"]] = PendingEdit(remarks)
        self._edits = edits
        self._dirty = False

    def get(self, product_id) -> PendingEdit:
        return self._edits.get(product_id, _EMPTY)

    def toggle(self, product_id, tag: str, checked: bool) -> PendingEdit:
        """Add or remove *tag* on a product and mark the tracker dirty."""
        edit = self.get(product_id).with_tag(tag, checked)
        self._edits[product_id] = edit
        self._dirty = True
        return edit

    def pending_batch(self) -> list[dict]:
        """Return the flagged entries as a save-remarks batch, in page order."""
        return [
            {"product_id": product_id, **edit.to_dict()}
            for product_id, edit in self._edits.items()
            if edit.is_flagged
        ]

    def discard(self) -> None:
        """Drop every pending edit and the unsaved-changes flag."""
        self._edits = {}
        self._dirty = False
