"""Caller-supplied retrieve options."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ..core.constants import DEFAULT_PAGE


class RetrieveOptions(BaseModel):
    """Options accepted by ``retrieve``.

    ``page`` is stored exactly as supplied; the options resolver coerces
    malformed values to page 1 instead of rejecting them. ``colors`` keeps
    caller order with duplicates dropped. An empty tuple means no color
    filter.
    """

    page: Any = DEFAULT_PAGE
    colors: tuple[str, ...] = ()

    model_config = ConfigDict(frozen=True, extra="ignore")

    @field_validator("colors", mode="before")
    @classmethod
    def normalize_colors(cls, v: Any) -> tuple[Any, ...]:
        """Accept None, one color string, or any iterable of colors.

        None and the empty string mean no color filter; empty strings inside
        an iterable are dropped.
        """
        if v is None or v == "":
            return ()
        if isinstance(v, str):
            # A lone color still becomes a one-element filter
            return (v,)
        if not isinstance(v, Iterable):
            raise ValueError("colors must be a string or an iterable of strings")
        unique: list[Any] = []
        for color in v:
            if color != "" and color not in unique:
                unique.append(color)
        return tuple(unique)
