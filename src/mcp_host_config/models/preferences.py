from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Preferences(BaseModel):
    """Contents of preferences.json."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    allow_analytics: bool | None = Field(default=None, alias="allowAnalytics")
