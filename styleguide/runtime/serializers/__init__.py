# Copyright (c) 2026 Styleguide
# SPDX-License-Identifier: MIT

"""
Serializers for style guide output.

Each serializer renders a configuration for one consumer. None of them
modify the configuration.
"""

from styleguide.runtime.serializers.css import css_ident, to_css
from styleguide.runtime.serializers.swatch import to_swatch, to_swatches

__all__ = [
    "to_css",
    "css_ident",
    "to_swatch",
    "to_swatches",
]
