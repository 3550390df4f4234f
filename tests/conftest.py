"""Pytest configuration and fixtures."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta

import pytest

from libscore.models.model_library import GitHub, GitHubStats, Library, License, NpmStats

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=UTC)


@pytest.fixture
def current_time() -> datetime:
    """Fixed reference time so scores are reproducible."""
    return NOW


@pytest.fixture
def make_library(current_time: datetime) -> Callable[..., Library]:
    """Factory for library records.

    Defaults describe a modest, healthy library: 100 stars, 10k monthly
    downloads, MIT licensed, updated 10 days ago, created 2 years ago and
    supporting the New Architecture. Combined popularity is 1100, so no
    popularity tier fires and only "Recently updated" matches.
    """

    def _make(
        subscribers: int = 0,
        forks: int = 0,
        stars: int = 100,
        issues: int = 0,
        updated_days_ago: float = 10,
        created_days_ago: float = 730,
        downloads: int | None = 10_000,
        license_key: str | None = "mit",
        no_license: bool = False,
        new_architecture: bool = True,
        github_new_architecture: bool = True,
        unmaintained: bool = False,
        npm_pkg: str = "react-native-sample",
    ) -> Library:
        return Library(
            npm_pkg=npm_pkg,
            github=GitHub(
                full_name=f"sample/{npm_pkg}",
                stats=GitHubStats(
                    subscribers=subscribers,
                    forks=forks,
                    stars=stars,
                    issues=issues,
                    updated_at=current_time - timedelta(days=updated_days_ago),
                    created_at=current_time - timedelta(days=created_days_ago),
                ),
                new_architecture=github_new_architecture,
            ),
            npm=NpmStats(downloads=downloads),
            license=None if no_license else License(key=license_key),
            new_architecture=new_architecture,
            unmaintained=unmaintained,
        )

    return _make


@pytest.fixture
def sample_library(make_library) -> Library:
    """A default library from the factory."""
    return make_library()
