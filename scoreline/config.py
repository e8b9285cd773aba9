"""Runtime settings for scoreline.

Settings are passed explicitly to the client and service; nothing is
read from the environment.
"""

from pydantic import BaseModel, Field

ESPN_BASE_URL = "https://site.api.espn.com/apis/site/v2/sports"


class ScorelineSettings(BaseModel):
    """Client and query settings.

    Stale times are in seconds. Retry counts are extra attempts after the
    first failure, issued immediately.
    """

    base_url: str = ESPN_BASE_URL
    timeout: float | None = None  # None = no client-side timeout

    scoreboard_stale_time: float = Field(default=30.0, ge=0)
    summary_stale_time: float = Field(default=60.0, ge=0)
    scoreboard_retry: int = Field(default=1, ge=0)
    summary_retry: int = Field(default=1, ge=0)


def get_settings() -> ScorelineSettings:
    """Get default settings."""
    return ScorelineSettings()
