"""Trending evaluator combining download volume with penalties and a bonus."""

import logging
import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

from libscore.consts import NO_DOWNLOADS_POPULARITY, WEEK
from libscore.models.common import _utc_now
from libscore.models.model_eval import TrendingThresholds
from libscore.models.model_library import Library

logger = logging.getLogger(__name__)

_THREE_PLACES = Decimal("0.001")


def round3(value: float) -> float:
    """Round to 3 decimal places, halves away from zero on the exact binary value."""
    return float(Decimal(value).quantize(_THREE_PLACES, rounding=ROUND_HALF_UP))


def get_popularity_gain(downloads: int) -> float:
    """Approximate download growth from a single monthly reading.

    Fetching downloads twice per entry hits registry rate limits, so this
    derives a stand-in from one value. It is not a true delta over time.
    """
    return (math.floor(downloads / 4) - math.floor(downloads / 4.5)) / downloads


def calculate_popularity_score(
    library: Library,
    current_time: datetime | None = None,
    thresholds: TrendingThresholds | None = None,
) -> Library:
    """Compute the trending score of a library.

    Libraries without download data get NO_DOWNLOADS_POPULARITY. Otherwise:

        popularity = gain - downloads_penalty - unmaintained_penalty
                     - stars_penalty - fresh_package_penalty + download_bonus

    rounded to 3 decimal places. The value is unbounded and may be negative.

    Args:
        library: The library to score
        current_time: Reference time for package age (defaults to now)
        thresholds: Trending limits (defaults to TrendingThresholds())

    Returns:
        A copy of the library with popularity set
    """
    downloads = library.npm.downloads
    if not downloads:
        return library.model_copy(update={"popularity": NO_DOWNLOADS_POPULARITY})

    if current_time is None:
        current_time = _utc_now()
    if thresholds is None:
        thresholds = TrendingThresholds()

    stats = library.github.stats
    popularity_gain = get_popularity_gain(downloads)

    downloads_penalty = (
        thresholds.downloads_penalty if downloads < thresholds.min_monthly_downloads else 0
    )
    stars_penalty = thresholds.stars_penalty if stats.stars < thresholds.min_github_stars else 0
    unmaintained_penalty = thresholds.unmaintained_penalty if library.unmaintained else 0
    fresh_package_penalty = (
        thresholds.fresh_package_penalty if current_time - stats.created_at < WEEK else 0
    )
    download_bonus = (
        thresholds.download_bonus
        if popularity_gain > thresholds.bonus_gain_threshold
        and downloads > thresholds.many_monthly_downloads
        else 0
    )

    popularity = round3(
        popularity_gain
        - downloads_penalty
        - unmaintained_penalty
        - stars_penalty
        - fresh_package_penalty
        + download_bonus
    )
    logger.debug(f"{library.display_name}: gain={popularity_gain:.4f} popularity={popularity}")

    return library.model_copy(update={"popularity": popularity})


class TrendingEvaluator:
    """Evaluates libraries on download-driven popularity."""

    def __init__(self, thresholds: TrendingThresholds | None = None) -> None:
        self.thresholds = thresholds or TrendingThresholds()

    def evaluate(self, library: Library, current_time: datetime | None = None) -> Library:
        return calculate_popularity_score(library, current_time, self.thresholds)
