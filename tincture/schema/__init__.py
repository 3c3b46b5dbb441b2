# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Schema definitions for color values.

All types in this module are immutable (frozen dataclasses).
A value is always read under the ColorSpace tag it was built for.
"""

from tincture.schema.color_values import (
    ANSI16,
    ANSI256,
    CMY,
    CMYK,
    HCG,
    HCY,
    HSI,
    HSL,
    HSV,
    HWB,
    LAB,
    LCH,
    LMS,
    LUV,
    RGB,
    RYB,
    TSL,
    UVW,
    XYY,
    XYZ,
    YIQ,
    ColorSpace,
    ColorValue,
    Hex,
    Hub,
    HunterLab,
    Interval,
    ResolvedColor,
    XvYCC,
    YCbCr,
    YcCbcCrc,
    YCoCg,
    YDbDr,
    YPbPr,
)

__all__ = [
    # Tags
    "ColorSpace",
    "Hub",
    # Validation metadata
    "Interval",
    # Base type
    "ColorValue",
    # Hub values
    "RGB",
    "XYZ",
    # RGB-canonical values
    "Hex",
    "CMY",
    "CMYK",
    "HSL",
    "HSV",
    "HWB",
    "HCG",
    "HSI",
    "HCY",
    "TSL",
    "RYB",
    "ANSI16",
    "ANSI256",
    "YCbCr",
    "XvYCC",
    "YPbPr",
    "YDbDr",
    "YIQ",
    "YCoCg",
    "YcCbcCrc",
    # XYZ-canonical values
    "LAB",
    "LCH",
    "LUV",
    "UVW",
    "XYY",
    "LMS",
    "HunterLab",
    # Output record
    "ResolvedColor",
]
