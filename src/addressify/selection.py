"""Best-match selection over geocode candidates."""

from typing import TYPE_CHECKING, Optional, Sequence

from loguru import logger

if TYPE_CHECKING:
    from addressify.geocoding.base import GeocodeCandidate


def select_best(candidates: Sequence["GeocodeCandidate"]) -> Optional["GeocodeCandidate"]:
    """
    Pick the candidate with the highest importance.

    Only the running maximum is tracked, so the caller's sequence is never
    reordered. A later candidate replaces the current best only when its
    importance is strictly greater, which makes the earliest candidate win ties.

    Args:
        candidates: Candidates in provider order.

    Returns:
        The best candidate, or None for an empty sequence ("address not found").
    """
    best: Optional["GeocodeCandidate"] = None

    for candidate in candidates:
        if best is None or candidate.importance > best.importance:
            best = candidate

    if best is not None:
        logger.debug(
            "Selected '{}' (importance={}) from {} candidates",
            best.display_name,
            best.importance,
            len(candidates),
        )
    return best
