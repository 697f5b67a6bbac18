"""Bookkeeping for identifiers that must be unique within one file."""

from __future__ import annotations

import logging

from samgate.records.models import RecordKind

logger = logging.getLogger(__name__)


# Record kinds whose identifier must not repeat
TRACKED_KINDS = (RecordKind.REF_SEQ, RecordKind.READ_GROUP, RecordKind.PROGRAM)


class UniquenessTracker:
    """Per-scan sets of seen @SQ names, @RG IDs and @PG IDs.

    Create one tracker per scan; trackers are never shared.
    """

    def __init__(self) -> None:
        self._seen: dict[RecordKind, set[str]] = {kind: set() for kind in TRACKED_KINDS}

    def _ids(self, kind: RecordKind) -> set[str]:
        try:
            return self._seen[kind]
        except KeyError:
            raise ValueError(f"{kind.value} identifiers are not tracked") from None

    def claim(self, kind: RecordKind, identifier: str) -> bool:
        """Record an identifier.

        Returns:
            True if the identifier is new, False if it is a duplicate.
            A duplicate leaves the tracker unchanged.
        """
        ids = self._ids(kind)
        if identifier in ids:
            logger.debug("Duplicate %s identifier '%s'", kind.value, identifier)
            return False
        ids.add(identifier)
        return True
