from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from libscore.models.common import _as_utc


class DirectoryModel(BaseModel):
    """Base for directory records.

    Python code uses snake_case attributes while the directory JSON uses
    camelCase keys. Unknown keys are kept so scored output still carries
    everything the input had.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


class GitHubStats(DirectoryModel):
    """Repository statistics from the source-hosting platform."""

    subscribers: int = Field(ge=0, description="Watchers of the repository")
    forks: int = Field(ge=0, description="Fork count")
    stars: int = Field(ge=0, description="Stargazer count")
    issues: int = Field(ge=0, description="Open issue count")
    updated_at: datetime = Field(description="Last push/update timestamp")
    created_at: datetime = Field(description="Repository creation timestamp")

    @field_validator("updated_at", "created_at", mode="after")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        return _as_utc(value)


class GitHub(DirectoryModel):
    """Repository data harvested from the source-hosting platform."""

    full_name: str | None = Field(default=None, description="owner/repo")
    stats: GitHubStats
    new_architecture: bool = Field(
        default=False, description="Repository-level New Architecture support"
    )


class NpmStats(DirectoryModel):
    """Registry data for the package."""

    downloads: int | None = Field(default=None, ge=0, description="Monthly download count")


class License(DirectoryModel):
    """License detected on the repository."""

    key: str | None = Field(default=None, description="SPDX-like key, e.g. 'mit' or 'gpl-3.0'")
    name: str | None = None


class Library(DirectoryModel):
    """A library entry of the directory.

    The scoring fields at the bottom are empty on input and filled in on the
    copies returned by the evaluators.
    """

    npm_pkg: str | None = Field(default=None, description="Package name on the registry")
    github: GitHub
    npm: NpmStats = Field(default_factory=NpmStats)
    license: License | None = Field(description="Detected license, null when none was found")
    new_architecture: bool = Field(
        default=False, description="Record-level New Architecture support"
    )
    unmaintained: bool = Field(default=False, description="Explicitly marked as unmaintained")

    # Derived scores
    score: int | None = Field(default=None, description="Quality score, 0-100")
    matching_score_modifiers: list[str] | None = Field(
        default=None, description="Names of modifiers that matched, in table order"
    )
    popularity: float | None = Field(default=None, description="Trending score, unbounded")

    @property
    def display_name(self) -> str:
        """Best available human-readable name."""
        return self.npm_pkg or self.github.full_name or "unknown"
