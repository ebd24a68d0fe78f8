from __future__ import annotations
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigurationError

SLACK_URL = "https://slack.com/api"


class Level(str, Enum):
    """Notification style.

    verbose: full backtrace (default)
    compact: exception only
    minimal: worker and queue
    """

    VERBOSE = "verbose"
    COMPACT = "compact"
    MINIMAL = "minimal"

    @classmethod
    def parse(cls, value: Any) -> "Level":
        if isinstance(value, cls):
            return value
        for level in cls:
            if value == level.value:
                return level
        return cls.VERBOSE


class SlackSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # slack
    channel: str = Field(default="")
    token: str = Field(default="")
    level: Level = Field(default=Level.VERBOSE)
    # transport
    api_url: str = Field(default=SLACK_URL)
    timeout: Optional[float] = Field(default=10.0)
    swallow_errors: bool = Field(default=False)

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, v: Any) -> Level:
        return Level.parse(v)

    def is_configured(self) -> bool:
        return bool(self.channel) and bool(self.token)

    @property
    def endpoint(self) -> str:
        return self.api_url.rstrip("/") + "/chat.postMessage"


def configure(
    channel: Optional[str] = None,
    token: Optional[str] = None,
    level: Any = None,
    *,
    base: Optional[SlackSettings] = None,
    **options: Any,
) -> SlackSettings:
    """Build settings from ``base`` plus every field that is not None.

    Validation runs after all fields are applied, so a partial call is fine as
    long as ``base`` supplies the rest. Raises ConfigurationError when channel
    or token is still empty.
    """
    fields = (base or SlackSettings()).model_dump()
    updates = dict(channel=channel, token=token, level=level, **options)
    unknown = set(updates) - set(fields)
    if unknown:
        raise ConfigurationError(f"Unknown Slack setting(s): {', '.join(sorted(unknown))}")
    fields.update({k: v for k, v in updates.items() if v is not None})
    try:
        settings = SlackSettings(**fields)
    except ValidationError as e:
        raise ConfigurationError(str(e)) from e
    if not settings.is_configured():
        raise ConfigurationError("Slack channel and token are not configured.")
    return settings
