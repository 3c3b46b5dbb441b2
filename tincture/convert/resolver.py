# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Resolution engine: one source value → many color space representations.

Pipeline (per call, no shared mutable state):
    1. Validate the raw source value (tincture.convert.validate)
    2. Derive both hub values (rgb, xyz), each exactly once
    3. Derive every requested leaf from its canonical hub value
    4. Freeze everything into a ResolvedColor

Leaves only ever read hub values, never another leaf's output, so the
order in which targets are derived does not matter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Union

from tincture.schema import RGB, XYZ, ColorSpace, ColorValue, Hub, ResolvedColor
from tincture.convert.colorspace import srgb_to_xyz, xyz_to_srgb
from tincture.convert.registry import lookup, registered_spaces, space_tag
from tincture.convert.validate import normalize

logger = logging.getLogger(__name__)

SpaceLike = Union[ColorSpace, str]

ALL = "all"

# Accepted as a target; the flag itself is always available as ResolvedColor.web_safe
WEB_SAFE = "web_safe"

DEFAULT_SPACES: tuple[ColorSpace, ...] = (
    ColorSpace.RGB,
    ColorSpace.XYZ,
    ColorSpace.HEX,
    ColorSpace.HSL,
    ColorSpace.HSV,
    ColorSpace.HWB,
    ColorSpace.CMYK,
    ColorSpace.LAB,
    ColorSpace.LCH_AB,
    ColorSpace.LUV,
)


@dataclass(frozen=True)
class ResolveConfig:
    """
    Resolver configuration.

    Attributes:
        default_spaces: Targets used when resolve() is called without ``spaces``
    """
    default_spaces: tuple[ColorSpace, ...] = DEFAULT_SPACES

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "default_spaces", tuple(space_tag(s) for s in self.default_spaces),
        )


DEFAULT_CONFIG = ResolveConfig()


def _is_web_safe_token(space: SpaceLike) -> bool:
    return isinstance(space, str) and space.strip().lower() == WEB_SAFE


def _targets(
    spaces: Union[Iterable[SpaceLike], str, None],
    config: ResolveConfig,
) -> tuple[ColorSpace, ...]:
    """Requested tags, coerced and deduplicated in first-seen order."""
    if spaces is None:
        requested: Iterable[SpaceLike] = config.default_spaces
    elif isinstance(spaces, str) and spaces.strip().lower() == ALL:
        requested = registered_spaces()
    elif isinstance(spaces, (str, ColorSpace)):
        requested = (spaces,)
    else:
        requested = spaces
    return tuple(dict.fromkeys(
        space_tag(space) for space in requested if not _is_web_safe_token(space)
    ))


def _derive_hubs(source: ColorSpace, value: ColorValue) -> tuple[RGB, XYZ]:
    """Both hub values for a validated source value, each computed once."""
    if source is ColorSpace.RGB:
        logger.debug("Hub derivation: rgb source, xyz from rgb")
        return value, srgb_to_xyz(value)
    if source is ColorSpace.XYZ:
        logger.debug("Hub derivation: xyz source, rgb from xyz")
        return xyz_to_srgb(value), value

    entry = lookup(source)
    if entry.hub is Hub.RGB:
        logger.debug("Hub derivation: %s → rgb → xyz", source.value)
        rgb = entry.to_hub(value)
        return rgb, srgb_to_xyz(rgb)

    logger.debug("Hub derivation: %s → xyz → rgb", source.value)
    xyz = entry.to_hub(value)
    return xyz_to_srgb(xyz), xyz


def resolve(
    space: SpaceLike,
    value: Any,
    spaces: Union[Iterable[SpaceLike], str, None] = None,
    *,
    config: Optional[ResolveConfig] = None,
) -> ResolvedColor:
    """
    Resolve a color value into the requested color spaces.

    Args:
        space: Source color space tag (enum or name)
        value: Raw source value (see tincture.convert.validate.normalize)
        spaces: Target tags, "all" for every registered space, or None for
            ``config.default_spaces``. "web_safe" may be listed and is
            answered by ``ResolvedColor.web_safe``
        config: Resolver configuration (default DEFAULT_CONFIG)

    Returns:
        ResolvedColor holding rgb, xyz, the source value and every target

    Raises:
        UnknownSpaceError: If the source or a target tag is unknown
        InvalidInputError: If the source value fails validation

    Example:
        >>> color = resolve("rgb", {"red": 102, "green": 51, "blue": 153}, ["hex", "hsl"])
        >>> color["hex"]
        Hex(code='#663399')
    """
    config = config or DEFAULT_CONFIG
    source = space_tag(space)
    targets = _targets(spaces, config)
    source_value = normalize(source, value)

    rgb, xyz = _derive_hubs(source, source_value)
    hubs = {Hub.RGB: rgb, Hub.XYZ: xyz}

    values: dict[ColorSpace, ColorValue] = {
        ColorSpace.RGB: rgb,
        ColorSpace.XYZ: xyz,
        source: source_value,
    }
    for target in targets:
        if target in values:
            continue
        entry = lookup(target)
        values[target] = entry.from_hub(hubs[entry.hub])

    logger.debug("Resolved %s into %d spaces", source.value, len(values))
    return ResolvedColor(source=source, values=values)


def convert(space: SpaceLike, value: Any, target: SpaceLike) -> ColorValue:
    """
    Convert one value to a single target space.

    Example:
        >>> convert("hex", "#663399", "hsl")
        HSL(hue=270.0, saturation=50.0, lightness=40.0)
    """
    target = space_tag(target)
    return resolve(space, value, (target,))[target]
