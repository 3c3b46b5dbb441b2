# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Conversion registry: one entry per leaf color space.

Each entry records the space's value class, its canonical hub (RGB or XYZ)
and the pair of pure functions converting to and from that hub. The
resolver only ever reads this table; it never branches on space names.

Adding a space means writing one to-hub / from-hub pair and one entry here.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping, Union

from tincture.errors import UnknownSpaceError
from tincture.schema import (
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
    XvYCC,
    YCbCr,
    YcCbcCrc,
    YCoCg,
    YDbDr,
    YPbPr,
)
from tincture.convert import rgb_models, xyz_models
from tincture.convert.working_spaces import WORKING_SPACES

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionEntry:
    """
    Registry row for one leaf space.

    Attributes:
        space: The leaf tag
        value_type: Value class for this tag
        hub: Canonical hub the conversions go through
        to_hub: value → hub value (RGB or XYZ)
        from_hub: hub value → value
    """
    space: ColorSpace
    value_type: type[ColorValue]
    hub: Hub
    to_hub: Callable[[ColorValue], ColorValue]
    from_hub: Callable[[ColorValue], ColorValue]


HUB_VALUE_TYPES: Mapping[Hub, type[ColorValue]] = MappingProxyType({
    Hub.RGB: RGB,
    Hub.XYZ: XYZ,
})


def _rgb(space: ColorSpace, value_type: type[ColorValue], to_hub, from_hub) -> ConversionEntry:
    return ConversionEntry(space, value_type, Hub.RGB, to_hub, from_hub)


def _xyz(space: ColorSpace, value_type: type[ColorValue], to_hub, from_hub) -> ConversionEntry:
    return ConversionEntry(space, value_type, Hub.XYZ, to_hub, from_hub)


_ENTRIES = (
    # RGB-canonical
    _rgb(ColorSpace.HEX, Hex, rgb_models.hex_to_rgb, rgb_models.rgb_to_hex),
    _rgb(ColorSpace.CMY, CMY, rgb_models.cmy_to_rgb, rgb_models.rgb_to_cmy),
    _rgb(ColorSpace.CMYK, CMYK, rgb_models.cmyk_to_rgb, rgb_models.rgb_to_cmyk),
    _rgb(ColorSpace.HSL, HSL, rgb_models.hsl_to_rgb, rgb_models.rgb_to_hsl),
    _rgb(ColorSpace.HSV, HSV, rgb_models.hsv_to_rgb, rgb_models.rgb_to_hsv),
    _rgb(ColorSpace.HWB, HWB, rgb_models.hwb_to_rgb, rgb_models.rgb_to_hwb),
    _rgb(ColorSpace.HCG, HCG, rgb_models.hcg_to_rgb, rgb_models.rgb_to_hcg),
    _rgb(ColorSpace.HSI, HSI, rgb_models.hsi_to_rgb, rgb_models.rgb_to_hsi),
    _rgb(ColorSpace.HCY, HCY, rgb_models.hcy_to_rgb, rgb_models.rgb_to_hcy),
    _rgb(ColorSpace.TSL, TSL, rgb_models.tsl_to_rgb, rgb_models.rgb_to_tsl),
    _rgb(ColorSpace.RYB, RYB, rgb_models.ryb_to_rgb, rgb_models.rgb_to_ryb),
    _rgb(ColorSpace.ANSI16, ANSI16, rgb_models.ansi16_to_rgb, rgb_models.rgb_to_ansi16),
    _rgb(ColorSpace.ANSI256, ANSI256, rgb_models.ansi256_to_rgb, rgb_models.rgb_to_ansi256),
    _rgb(ColorSpace.YCBCR_BT601, YCbCr, rgb_models.ycbcr_bt601_to_rgb, rgb_models.rgb_to_ycbcr_bt601),
    _rgb(ColorSpace.YCBCR_BT709, YCbCr, rgb_models.ycbcr_bt709_to_rgb, rgb_models.rgb_to_ycbcr_bt709),
    _rgb(ColorSpace.YCBCR_BT2020, YCbCr, rgb_models.ycbcr_bt2020_to_rgb, rgb_models.rgb_to_ycbcr_bt2020),
    _rgb(ColorSpace.YPBPR, YPbPr, rgb_models.ypbpr_to_rgb, rgb_models.rgb_to_ypbpr),
    _rgb(ColorSpace.YDBDR, YDbDr, rgb_models.ydbdr_to_rgb, rgb_models.rgb_to_ydbdr),
    _rgb(ColorSpace.YIQ, YIQ, rgb_models.yiq_to_rgb, rgb_models.rgb_to_yiq),
    _rgb(ColorSpace.YCOCG, YCoCg, rgb_models.ycocg_to_rgb, rgb_models.rgb_to_ycocg),
    _rgb(ColorSpace.YCCBCCRC, YcCbcCrc, rgb_models.yccbccrc_to_rgb, rgb_models.rgb_to_yccbccrc),
    _rgb(ColorSpace.XVYCC, XvYCC, rgb_models.xvycc_to_rgb, rgb_models.rgb_to_xvycc),
    # XYZ-canonical
    _xyz(ColorSpace.LAB, LAB, xyz_models.lab_to_xyz, xyz_models.xyz_to_lab),
    _xyz(ColorSpace.LCH_AB, LCH, xyz_models.lch_ab_to_xyz, xyz_models.xyz_to_lch_ab),
    _xyz(ColorSpace.LUV, LUV, xyz_models.luv_to_xyz, xyz_models.xyz_to_luv),
    _xyz(ColorSpace.LCH_UV, LCH, xyz_models.lch_uv_to_xyz, xyz_models.xyz_to_lch_uv),
    _xyz(ColorSpace.UVW, UVW, xyz_models.uvw_to_xyz, xyz_models.xyz_to_uvw),
    _xyz(ColorSpace.XYY, XYY, xyz_models.xyy_to_xyz, xyz_models.xyz_to_xyy),
    _xyz(ColorSpace.LMS, LMS, xyz_models.lms_to_xyz, xyz_models.xyz_to_lms),
    _xyz(ColorSpace.HUNTER_LAB, HunterLab, xyz_models.hunter_lab_to_xyz, xyz_models.xyz_to_hunter_lab),
    # RGB working spaces
    *(
        _xyz(working.space, RGB, working.to_xyz, working.from_xyz)
        for working in WORKING_SPACES.values()
    ),
)


def _check_registry(entries: tuple[ConversionEntry, ...]) -> Mapping[ColorSpace, ConversionEntry]:
    """
    Build the read-only registry, verifying it covers every leaf tag exactly once.

    Raises:
        RuntimeError: If a tag is missing, duplicated, a hub, or mistyped
    """
    counts = Counter(entry.space for entry in entries)
    duplicated = sorted(space.value for space, count in counts.items() if count > 1)
    if duplicated:
        raise RuntimeError(f"Duplicate registry entries: {', '.join(duplicated)}")

    leaves = {space for space in ColorSpace if not space.is_hub}
    missing = sorted(space.value for space in leaves - counts.keys())
    if missing:
        raise RuntimeError(f"Missing registry entries: {', '.join(missing)}")

    for entry in entries:
        if entry.space.is_hub:
            raise RuntimeError(f"Hub {entry.space.value!r} must not have a registry entry")
        if not isinstance(entry.hub, Hub):
            raise RuntimeError(f"{entry.space.value!r} has no canonical hub")
        if not issubclass(entry.value_type, ColorValue):
            raise RuntimeError(f"{entry.space.value!r} has an invalid value type")

    registry = MappingProxyType({entry.space: entry for entry in entries})
    logger.debug(
        "Registered %d leaf spaces (%d rgb-canonical, %d xyz-canonical)",
        len(registry),
        sum(1 for entry in entries if entry.hub is Hub.RGB),
        sum(1 for entry in entries if entry.hub is Hub.XYZ),
    )
    return registry


REGISTRY: Mapping[ColorSpace, ConversionEntry] = _check_registry(_ENTRIES)


def space_tag(space: Union[ColorSpace, str]) -> ColorSpace:
    """
    Coerce an enum member or tag name (case-insensitive) to a ColorSpace.

    Raises:
        UnknownSpaceError: If the name is not a known tag
    """
    if isinstance(space, ColorSpace):
        return space
    if isinstance(space, str):
        try:
            return ColorSpace(space.strip().lower())
        except ValueError:
            pass
    raise UnknownSpaceError(space)


def lookup(space: Union[ColorSpace, str]) -> ConversionEntry:
    """
    Registry entry for a leaf space.

    Raises:
        UnknownSpaceError: If the tag is unknown or is one of the hubs
    """
    tag = space_tag(space)
    try:
        return REGISTRY[tag]
    except KeyError:
        raise UnknownSpaceError(space) from None


def value_type(space: Union[ColorSpace, str]) -> type[ColorValue]:
    """Value class for any tag, hubs included."""
    tag = space_tag(space)
    if tag.is_hub:
        return HUB_VALUE_TYPES[Hub(tag.value)]
    return lookup(tag).value_type


def registered_spaces() -> tuple[ColorSpace, ...]:
    """Every resolvable tag: the two hubs first, then leaves in registry order."""
    return (ColorSpace.RGB, ColorSpace.XYZ, *REGISTRY)
