"""Quality evaluator using a fixed table of weighted modifiers."""

import logging
import math
from datetime import datetime

from libscore.consts import (
    DAY,
    DOWNLOADS_DIVISOR,
    FORK_WEIGHT,
    KNOWN_THRESHOLD,
    LOTS_OF_ISSUES_THRESHOLD,
    NOT_UPDATED_RECENTLY_DAYS,
    POPULAR_THRESHOLD,
    RECENTLY_UPDATED_DAYS,
    RESTRICTIVE_LICENSE_PREFIXES,
    STAR_WEIGHT,
    SUBSCRIBER_WEIGHT,
    VERY_POPULAR_THRESHOLD,
)
from libscore.models.common import _utc_now
from libscore.models.model_eval import Modifier
from libscore.models.model_library import Library

logger = logging.getLogger(__name__)


def get_combined_popularity(library: Library) -> float:
    """Weighted sum of repository and registry signals gating the popularity tiers.

    An explicit null download count counts as 0. A record whose npm data has
    no downloads key at all gets NaN, so none of the tier checks pass.
    """
    stats = library.github.stats
    if "downloads" not in library.npm.model_fields_set:
        return math.nan
    downloads = library.npm.downloads or 0
    return (
        stats.subscribers * SUBSCRIBER_WEIGHT
        + stats.forks * FORK_WEIGHT
        + stats.stars * STAR_WEIGHT
        + downloads / DOWNLOADS_DIVISOR
    )


def get_updated_days_ago(library: Library, current_time: datetime) -> float:
    """Fractional days since the repository was last updated."""
    return (current_time - library.github.stats.updated_at) / DAY


def _has_restrictive_license(library: Library, current_time: datetime) -> bool:
    if library.license is None or not library.license.key:
        return False
    return library.license.key.startswith(RESTRICTIVE_LICENSE_PREFIXES)


def _lacks_new_architecture(library: Library, current_time: datetime) -> bool:
    return not library.new_architecture or not library.github.new_architecture


# Order matters: matching names are reported in this order.
MODIFIERS: tuple[Modifier, ...] = (
    Modifier(
        name="Very popular",
        value=45,
        condition=lambda lib, now: get_combined_popularity(lib) > VERY_POPULAR_THRESHOLD,
    ),
    Modifier(
        name="Popular",
        value=30,
        condition=lambda lib, now: get_combined_popularity(lib) > POPULAR_THRESHOLD,
    ),
    Modifier(
        name="Known",
        value=15,
        condition=lambda lib, now: get_combined_popularity(lib) > KNOWN_THRESHOLD,
    ),
    Modifier(
        name="Lots of open issues",
        value=-20,
        condition=lambda lib, now: lib.github.stats.issues >= LOTS_OF_ISSUES_THRESHOLD,
    ),
    Modifier(
        name="No license",
        value=-20,
        condition=lambda lib, now: lib.license is None,
    ),
    Modifier(
        name="GPL license",
        value=-20,
        condition=_has_restrictive_license,
    ),
    Modifier(
        name="Recently updated",
        value=10,
        condition=lambda lib, now: get_updated_days_ago(lib, now) <= RECENTLY_UPDATED_DAYS,
    ),
    Modifier(
        name="Not updated recently",
        value=-20,
        condition=lambda lib, now: get_updated_days_ago(lib, now) >= NOT_UPDATED_RECENTLY_DAYS,
    ),
    Modifier(
        name="Not supporting New Architecture",
        value=-5,
        condition=_lacks_new_architecture,
    ),
)

# Theoretical bounds of the raw score, used for linear rescaling
MIN_POSSIBLE_SCORE = sum(m.value for m in MODIFIERS if m.value < 0)
MAX_POSSIBLE_SCORE = sum(m.value for m in MODIFIERS if m.value > 0)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def get_matching_modifiers(library: Library, current_time: datetime) -> list[Modifier]:
    """Return the modifiers whose condition holds, in table order."""
    return [modifier for modifier in MODIFIERS if modifier.matches(library, current_time)]


def calculate_directory_score(
    library: Library, current_time: datetime | None = None
) -> Library:
    """Score a library from 0 to 100 based on the modifiers it matches.

    The raw score (sum of matching modifier values) is rescaled linearly so
    that MIN_POSSIBLE_SCORE maps to 0 and MAX_POSSIBLE_SCORE maps to 100.
    The result is not clamped.

    Args:
        library: The library to score
        current_time: Reference time for update recency (defaults to now)

    Returns:
        A copy of the library with score and matching_score_modifiers set
    """
    if current_time is None:
        current_time = _utc_now()

    matching = get_matching_modifiers(library, current_time)
    raw_score = sum(modifier.value for modifier in matching)

    score = round_half_up(
        (raw_score - MIN_POSSIBLE_SCORE) / (MAX_POSSIBLE_SCORE - MIN_POSSIBLE_SCORE) * 100
    )
    names = [modifier.name for modifier in matching]

    logger.debug(f"{library.display_name}: raw={raw_score} score={score} modifiers={names}")
    if not 0 <= score <= 100:
        logger.warning(f"Quality score for {library.display_name} out of range: {score}")

    return library.model_copy(update={"score": score, "matching_score_modifiers": names})


class QualityEvaluator:
    """Evaluates libraries against the modifier table.

    Thin wrapper around calculate_directory_score so the quality score can be
    used wherever a BaseEvaluator is expected.
    """

    def evaluate(self, library: Library, current_time: datetime | None = None) -> Library:
        return calculate_directory_score(library, current_time)


def main() -> None:
    """Print the modifier table and its bounds."""
    print("Quality Evaluator Modifiers")
    print("=" * 50)
    for modifier in MODIFIERS:
        print(f"  {modifier.value:+4d}  {modifier.name}")
    print(f"\nMin possible raw score: {MIN_POSSIBLE_SCORE}")
    print(f"Max possible raw score: {MAX_POSSIBLE_SCORE}")


if __name__ == "__main__":
    main()
