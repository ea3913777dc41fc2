"""Visibility policy configuration using Pydantic models."""

import os
from collections.abc import Mapping
from typing import Any, assert_never

from pydantic import BaseModel, Field, field_validator

from redwood.io.filters import DefaultState, VisibilityFilter


def _split(value: str) -> set[str]:
    return {part.strip() for part in value.split(",") if part.strip()}


class VisibilityConfig(BaseModel):
    """Default policy plus the channels shown or hidden on top of it."""

    default: DefaultState = DefaultState.SHOW_ALL
    show: set[str] = Field(default_factory=set)
    hide: set[str] = Field(default_factory=set)

    @field_validator("default", mode="before")
    @classmethod
    def _parse_default(cls, value: Any) -> Any:
        # "show_all" / "HIDE_ALL" -> enum member by name
        if isinstance(value, str):
            try:
                return DefaultState[value.strip().upper()]
            except KeyError:
                raise ValueError(f"unknown visibility policy: {value!r}") from None
        return value

    @field_validator("show", "hide", mode="before")
    @classmethod
    def _parse_channels(cls, value: Any) -> Any:
        if isinstance(value, str):
            return _split(value)
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "VisibilityConfig":
        """Read REDWOOD_VISIBILITY, REDWOOD_SHOW and REDWOOD_HIDE."""
        data: dict[str, str] = {}
        for key, var in (("default", "REDWOOD_VISIBILITY"), ("show", "REDWOOD_SHOW"), ("hide", "REDWOOD_HIDE")):
            if var in environ:
                data[key] = environ[var]
        return cls.model_validate(data)

    def apply(self, visibility: VisibilityFilter) -> VisibilityFilter:
        """Reset the filter to this policy. Hiding wins over showing."""
        match self.default:
            case DefaultState.SHOW_ALL:
                visibility.show_all()
            case DefaultState.HIDE_ALL:
                visibility.hide_all()
            case _:
                assert_never(self.default)
        for channel in sorted(self.show):
            visibility.also_show(channel)
        for channel in sorted(self.hide):
            visibility.also_hide(channel)
        return visibility
