# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Service runtime for the style guide.

Request handlers over the color engine and the configuration store, the
FastAPI routes that expose them, and serializers for CSS and display
swatches.
"""

from styleguide.runtime.api import (
    InvalidColorError,
    RequestError,
    UnknownFormatError,
    contrast,
    convert_color,
    generate_palette,
    list_named_colors,
    match_color,
)
from styleguide.runtime.models import (
    ContrastRequest,
    ConvertRequest,
    GenerateRequest,
    MatchRequest,
)
from styleguide.runtime.routes import create_app, router
from styleguide.runtime.serializers import to_css, to_swatch, to_swatches

__all__ = [
    # Service
    "create_app",
    "router",
    # Request models
    "ConvertRequest",
    "ContrastRequest",
    "MatchRequest",
    "GenerateRequest",
    # Color handlers
    "convert_color",
    "contrast",
    "match_color",
    "list_named_colors",
    "generate_palette",
    # Errors
    "RequestError",
    "UnknownFormatError",
    "InvalidColorError",
    # Serializers
    "to_css",
    "to_swatch",
    "to_swatches",
]
