"""Remark tags and their persisted comma-joined encoding."""
import logging
from enum import Enum
from typing import Iterable, Optional

logger = logging.getLogger(__name__)

REMARK_SEPARATOR = ","


class RemarkTag(str, Enum):
    """Moderation reasons a reviewer can attach to a product."""

    POSE_ISSUE = "pose_issue"
    HANDS_VISIBILITY = "hands_visibility"
    QUALITY_ISSUE = "quality_issue"
    NSFW = "nsfw"


# Checkbox labels, in display order
REMARK_LABELS = {
    RemarkTag.POSE_ISSUE.value: "Pose Issue",
    RemarkTag.HANDS_VISIBILITY.value: "Hands Visibility",
    RemarkTag.QUALITY_ISSUE.value: "Quality Issue",
    RemarkTag.NSFW.value: "NSFW",
}

_KNOWN_TAGS = frozenset(tag.value for tag in RemarkTag)


def is_remark_tag(value) -> bool:
    """Return True if *value* names one of the RemarkTag values."""
    if isinstance(value, RemarkTag):
        return True
    return isinstance(value, str) and value in _KNOWN_TAGS


def normalize_remarks(values: Optional[Iterable]) -> tuple[str, ...]:
    """Return the recognised tags in *values*, first-seen order, without duplicates.

    Unknown tags are dropped (and logged) rather than persisted verbatim.
    """
    if not values:
        return ()
    seen: list[str] = []
    for value in values:
        if isinstance(value, RemarkTag):
            value = value.value
        if not is_remark_tag(value):
            logger.warning("Ignoring unknown remark tag %r", value)
            continue
        if value not in seen:
            seen.append(value)
    return tuple(seen)


def encode_remarks(values: Optional[Iterable]) -> Optional[str]:
    """Serialize a remark set for the ``products.remarks`` column.

    An empty set is stored as NULL, never as an empty string.
    """
    tags = normalize_remarks(values)
    if not tags:
        return None
    return REMARK_SEPARATOR.join(tags)


def decode_remarks(raw: Optional[str]) -> tuple[str, ...]:
    """Split a stored remark string back into its tags."""
    if not raw:
        return ()
    return tuple(part.strip() for part in raw.split(REMARK_SEPARATOR) if part.strip())
