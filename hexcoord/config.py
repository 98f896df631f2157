"""Validated layout settings for hosts that keep their grid setup as data."""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .coords import OrientationType, Parity, Point
from .errors import InvalidArgument
from .layout import Layout

logger = logging.getLogger(__name__)


class LayoutSettings(BaseModel):
    """Serialisable description of a :class:`~hexcoord.layout.Layout`."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    orientation: OrientationType = Field(default=OrientationType.POINTY)
    parity: Parity = Field(default=Parity.EVEN)
    size_x: float = Field(default=1.0)
    size_y: float = Field(default=1.0)
    origin_x: float = Field(default=0.0)
    origin_y: float = Field(default=0.0)

    @field_validator("size_x", "size_y")
    @classmethod
    def _non_degenerate_size(cls, value: float) -> float:
        value = float(value)
        if value == 0 or not math.isfinite(value):
            raise ValueError("size must be finite and non-zero")
        return value

    @field_validator("origin_x", "origin_y")
    @classmethod
    def _finite_origin(cls, value: float) -> float:
        value = float(value)
        if not math.isfinite(value):
            raise ValueError("origin must be finite")
        return value

    def to_layout(self) -> Layout:
        return Layout(
            kind=self.orientation,
            size=Point(self.size_x, self.size_y),
            origin=Point(self.origin_x, self.origin_y),
            parity=self.parity,
        )

    @classmethod
    def from_layout(cls, layout: Layout) -> LayoutSettings:
        return cls(
            orientation=layout.kind,
            parity=layout.parity,
            size_x=layout.size.x,
            size_y=layout.size.y,
            origin_x=layout.origin.x,
            origin_y=layout.origin.y,
        )


def layout_from_settings(payload: Mapping[str, Any] | str | bytes) -> Layout:
    """Build a layout from a settings mapping or its JSON text.

    Validation failures surface as :class:`~hexcoord.errors.InvalidArgument`.
    """

    try:
        if isinstance(payload, (str, bytes)):
            settings = LayoutSettings.model_validate_json(payload)
        else:
            settings = LayoutSettings.model_validate(dict(payload))
    except ValidationError as exc:
        logger.debug("Rejected layout settings: %s", exc)
        raise InvalidArgument(f"Invalid layout settings: {exc}") from exc
    layout = settings.to_layout()
    logger.debug(
        "Resolved %s layout (parity=%s, size=%s, origin=%s)",
        layout.kind.value,
        layout.parity.name,
        layout.size,
        layout.origin,
    )
    return layout
