# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Tincture -- Color space resolver.

Converts one color value into any number of color space representations,
routing every conversion through two hubs: sRGB and CIE XYZ (D65).

Quick start::

    from tincture import resolve

    color = resolve("rgb", {"red": 102, "green": 51, "blue": 153}, ["hex", "hsl", "lab"])
    color["hex"]     # Hex(code='#663399')
    color["hsl"]     # HSL(hue=270.0, saturation=50.0, lightness=40.0)
    color.to_json()  # Every resolved value as JSON
"""

from __future__ import annotations

__version__ = "1.0.0"

from tincture.convert import (
    Illuminant,
    adapt,
    adapt_named,
    adapt_with_matrix,
    convert,
    resolve,
)
from tincture.errors import (
    InvalidInputError,
    TinctureError,
    UnknownIlluminantError,
    UnknownSpaceError,
)
from tincture.schema import ColorSpace, ResolvedColor

__all__ = [
    # Core API
    "resolve",
    "convert",
    "ResolvedColor",
    "ColorSpace",
    # Adaptation
    "adapt",
    "adapt_named",
    "adapt_with_matrix",
    "Illuminant",
    # Errors
    "TinctureError",
    "InvalidInputError",
    "UnknownSpaceError",
    "UnknownIlluminantError",
    # Version
    "__version__",
]
