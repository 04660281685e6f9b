# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Request bodies for the style guide API.

Pydantic validates shape and ranges before a handler runs. Color fields are
strict: numbers must be JSON numbers (not strings or booleans), flags must
be JSON booleans. Field aliases keep the camelCase wire names.
"""

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool

from styleguide.schema.color import OKLCHColor, RGBColor


class OKLCHPayload(BaseModel):
    model_config = ConfigDict(allow_inf_nan=False)

    l: float = Field(strict=True, ge=0.0, le=1.0)
    c: float = Field(strict=True, ge=0.0)
    h: float = Field(strict=True)
    alpha: float = Field(default=1.0, strict=True, ge=0.0, le=1.0)

    def to_color(self) -> OKLCHColor:
        return OKLCHColor(l=self.l, c=self.c, h=self.h, alpha=self.alpha)


class RGBPayload(BaseModel):
    """8-bit channels; fractional values are rounded."""
    model_config = ConfigDict(allow_inf_nan=False)

    r: float = Field(strict=True, ge=0, le=255)
    g: float = Field(strict=True, ge=0, le=255)
    b: float = Field(strict=True, ge=0, le=255)
    alpha: float = Field(default=1.0, strict=True, ge=0.0, le=1.0)

    def to_color(self) -> RGBColor:
        return RGBColor(
            r=int(round(self.r)),
            g=int(round(self.g)),
            b=int(round(self.b)),
            alpha=self.alpha,
        )


# An "r" key selects RGB; otherwise the payload must be OKLCH.
AnyColorPayload = Union[RGBPayload, OKLCHPayload]


class ConvertRequest(BaseModel):
    """``value`` is checked against ``from`` by the handler."""
    model_config = ConfigDict(populate_by_name=True)

    source: str = Field(alias="from")
    value: Any = None


class ContrastRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    foreground: AnyColorPayload
    background: AnyColorPayload
    is_large_text: StrictBool = Field(default=False, alias="isLargeText")


class MatchRequest(BaseModel):
    color: OKLCHPayload


class GenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    base_color: OKLCHPayload = Field(alias="baseColor")
