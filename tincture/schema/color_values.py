# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Typed color values and the resolved color record.

Design principles:
- Immutable: every value is a frozen, slotted dataclass
- Tagged: a value is only ever read under the ColorSpace it was built for
- Plain data: no conversion logic lives here, only shape and serialization

Validation of raw input happens once, in ``tincture.convert.validate``.
Values produced by conversions are trusted and may fall outside the input
ranges (e.g. an out-of-gamut Lab color has RGB channels outside 0-255).

Hub spaces:
- rgb: sRGB, channels 0-255
- xyz: CIE XYZ under D65, Y of the reference white = 100
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Iterator, Mapping, NamedTuple, Optional, Union


# =============================================================================
# Color Space Tags
# =============================================================================


class ColorSpace(str, Enum):
    """Closed set of color space tags understood by the resolver."""

    # Hubs
    RGB = "rgb"
    XYZ = "xyz"

    # RGB-canonical leaves
    HEX = "hex"
    CMY = "cmy"
    CMYK = "cmyk"
    HSL = "hsl"
    HSV = "hsv"
    HWB = "hwb"
    HCG = "hcg"
    HSI = "hsi"
    HCY = "hcy"
    TSL = "tsl"
    RYB = "ryb"
    ANSI16 = "ansi16"
    ANSI256 = "ansi256"
    YCBCR_BT601 = "ycbcr_bt601"
    YCBCR_BT709 = "ycbcr_bt709"
    YCBCR_BT2020 = "ycbcr_bt2020"
    YPBPR = "ypbpr"
    YDBDR = "ydbdr"
    YIQ = "yiq"
    YCOCG = "ycocg"
    YCCBCCRC = "yccbccrc"
    XVYCC = "xvycc"

    # XYZ-canonical leaves
    LAB = "lab"
    LCH_AB = "lch_ab"
    LUV = "luv"
    LCH_UV = "lch_uv"
    UVW = "uvw"
    XYY = "xyy"
    LMS = "lms"
    HUNTER_LAB = "hunter_lab"

    # RGB working spaces (XYZ-canonical, adapted to D65)
    ADOBE_98_RGB = "adobe_98_rgb"
    APPLE_RGB = "apple_rgb"
    BEST_RGB = "best_rgb"
    BETA_RGB = "beta_rgb"
    BRUCE_RGB = "bruce_rgb"
    CIE_RGB = "cie_rgb"
    COLOR_MATCH_RGB = "color_match_rgb"
    DON_RGB_4 = "don_rgb_4"
    ECI_RGB_V2 = "eci_rgb_v2"
    ETKA_SPACE_PS5 = "etka_space_ps5"
    NTSC_RGB = "ntsc_rgb"
    PAL_SECAM_RGB = "pal_secam_rgb"
    PRO_PHOTO_RGB = "pro_photo_rgb"
    SMPTE_C_RGB = "smpte_c_rgb"
    WIDE_GAMUT_RGB = "wide_gamut_rgb"

    @property
    def is_hub(self) -> bool:
        """True for the two pivot spaces (rgb, xyz)."""
        return self in (ColorSpace.RGB, ColorSpace.XYZ)


class Hub(Enum):
    """The two pivot representations every leaf space converts through."""

    RGB = "rgb"
    XYZ = "xyz"

    @property
    def space(self) -> ColorSpace:
        return ColorSpace(self.value)


# =============================================================================
# Field Ranges
# =============================================================================


class Interval(NamedTuple):
    """Accepted input range for one field."""

    low: float
    high: float
    closed_high: bool = True

    def contains(self, value: float) -> bool:
        if value < self.low:
            return False
        return value <= self.high if self.closed_high else value < self.high

    def describe(self) -> str:
        bracket = "]" if self.closed_high else ")"
        return f"[{self.low:g}, {self.high:g}{bracket}"


BYTE = Interval(0.0, 255.0)
PERCENT = Interval(0.0, 100.0)
UNIT = Interval(0.0, 1.0)
HUE = Interval(0.0, 360.0, closed_high=False)
NON_NEGATIVE = Interval(0.0, math.inf)
HALF = Interval(-0.5, 0.5)


def _round(value: Any, precision: Optional[int]) -> Any:
    if precision is None or not isinstance(value, float):
        return value
    return round(value, precision)


# =============================================================================
# Value Base
# =============================================================================


class ColorValue:
    """
    Base class for all typed color values.

    Subclasses are frozen dataclasses. Class attributes describe input
    validation:
        RANGES: field name -> accepted Interval (absent = unbounded)
        ALIASES: short key -> field name, accepted in mapping input
        INTEGRAL: True when fields must be whole numbers
    """

    __slots__ = ()

    RANGES: ClassVar[Mapping[str, Interval]] = {}
    ALIASES: ClassVar[Mapping[str, str]] = {}
    INTEGRAL: ClassVar[bool] = False

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Field names in declaration order (also the positional input order)."""
        return tuple(f.name for f in fields(cls))

    def check(self) -> None:
        """Extra cross-field validation; raise ValueError to reject the value."""

    def as_tuple(self) -> tuple:
        return tuple(getattr(self, name) for name in self.field_names())

    def to_dict(self, precision: Optional[int] = None) -> dict:
        """
        Serialize to dictionary.

        Args:
            precision: Round float fields to this many decimals (None = exact)
        """
        return {
            name: _round(getattr(self, name), precision)
            for name in self.field_names()
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]):
        """Deserialize from dictionary keyed by field name."""
        return cls(**{name: data[name] for name in cls.field_names()})


# =============================================================================
# Hub Values
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGB(ColorValue):
    """
    Gamma-encoded RGB, channels nominally 0-255.

    Used for sRGB (the hub) and for every named RGB working space.
    """
    red: float
    green: float
    blue: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "red": BYTE, "green": BYTE, "blue": BYTE,
    }
    ALIASES: ClassVar[Mapping[str, str]] = {"r": "red", "g": "green", "b": "blue"}


@dataclass(frozen=True, slots=True)
class XYZ(ColorValue):
    """CIE 1931 tristimulus values (Y of the reference white = 100)."""
    x: float
    y: float
    z: float

    ALIASES: ClassVar[Mapping[str, str]] = {"X": "x", "Y": "y", "Z": "z"}


# =============================================================================
# RGB-Canonical Values
# =============================================================================


@dataclass(frozen=True, slots=True)
class Hex(ColorValue):
    """Hex color code, normalized to lowercase ``#rrggbb``."""
    code: str

    ALIASES: ClassVar[Mapping[str, str]] = {"hex": "code", "value": "code"}

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True, slots=True)
class CMY(ColorValue):
    """Subtractive CMY, percentages 0-100."""
    cyan: float
    magenta: float
    yellow: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "cyan": PERCENT, "magenta": PERCENT, "yellow": PERCENT,
    }
    ALIASES: ClassVar[Mapping[str, str]] = {"c": "cyan", "m": "magenta", "y": "yellow"}


@dataclass(frozen=True, slots=True)
class CMYK(ColorValue):
    """Subtractive CMYK, percentages 0-100."""
    cyan: float
    magenta: float
    yellow: float
    key: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "cyan": PERCENT, "magenta": PERCENT, "yellow": PERCENT, "key": PERCENT,
    }
    ALIASES: ClassVar[Mapping[str, str]] = {
        "c": "cyan", "m": "magenta", "y": "yellow", "k": "key", "black": "key",
    }


@dataclass(frozen=True, slots=True)
class HSL(ColorValue):
    """Hue [0, 360), saturation and lightness 0-100."""
    hue: float
    saturation: float
    lightness: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "hue": HUE, "saturation": PERCENT, "lightness": PERCENT,
    }
    ALIASES: ClassVar[Mapping[str, str]] = {"h": "hue", "s": "saturation", "l": "lightness"}


@dataclass(frozen=True, slots=True)
class HSV(ColorValue):
    """Hue [0, 360), saturation and value 0-100."""
    hue: float
    saturation: float
    value: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "hue": HUE, "saturation": PERCENT, "value": PERCENT,
    }
    ALIASES: ClassVar[Mapping[str, str]] = {
        "h": "hue", "s": "saturation", "v": "value", "b": "value", "brightness": "value",
    }


@dataclass(frozen=True, slots=True)
class HWB(ColorValue):
    """Hue [0, 360), whiteness and blackness 0-100."""
    hue: float
    whiteness: float
    blackness: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "hue": HUE, "whiteness": PERCENT, "blackness": PERCENT,
    }
    ALIASES: ClassVar[Mapping[str, str]] = {"h": "hue", "w": "whiteness", "b": "blackness"}


@dataclass(frozen=True, slots=True)
class HCG(ColorValue):
    """Hue [0, 360), chroma and grayscale 0-100."""
    hue: float
    chroma: float
    grayscale: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "hue": HUE, "chroma": PERCENT, "grayscale": PERCENT,
    }
    ALIASES: ClassVar[Mapping[str, str]] = {"h": "hue", "c": "chroma", "g": "grayscale"}


@dataclass(frozen=True, slots=True)
class HSI(ColorValue):
    """Hue [0, 360), saturation and intensity 0-100."""
    hue: float
    saturation: float
    intensity: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "hue": HUE, "saturation": PERCENT, "intensity": PERCENT,
    }
    ALIASES: ClassVar[Mapping[str, str]] = {"h": "hue", "s": "saturation", "i": "intensity"}


@dataclass(frozen=True, slots=True)
class HCY(ColorValue):
    """Hue [0, 360), chroma and Rec. 601 luma 0-100."""
    hue: float
    chroma: float
    luma: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "hue": HUE, "chroma": PERCENT, "luma": PERCENT,
    }
    ALIASES: ClassVar[Mapping[str, str]] = {"h": "hue", "c": "chroma", "y": "luma"}


@dataclass(frozen=True, slots=True)
class TSL(ColorValue):
    """Tint [0, 1), saturation 0-1, lightness (luma) 0-1."""
    tint: float
    saturation: float
    lightness: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "tint": Interval(0.0, 1.0, closed_high=False),
        "saturation": UNIT,
        "lightness": UNIT,
    }
    ALIASES: ClassVar[Mapping[str, str]] = {"t": "tint", "s": "saturation", "l": "lightness"}


@dataclass(frozen=True, slots=True)
class RYB(ColorValue):
    """Painter's red-yellow-blue, channels 0-255."""
    red: float
    yellow: float
    blue: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "red": BYTE, "yellow": BYTE, "blue": BYTE,
    }
    ALIASES: ClassVar[Mapping[str, str]] = {"r": "red", "y": "yellow", "b": "blue"}


@dataclass(frozen=True, slots=True)
class ANSI16(ColorValue):
    """ANSI SGR foreground code: 30-37 (normal) or 90-97 (bright)."""
    code: int

    RANGES: ClassVar[Mapping[str, Interval]] = {"code": Interval(30, 97)}
    INTEGRAL: ClassVar[bool] = True

    def check(self) -> None:
        if not (30 <= self.code <= 37 or 90 <= self.code <= 97):
            raise ValueError(f"code must be 30-37 or 90-97, got {self.code}")


@dataclass(frozen=True, slots=True)
class ANSI256(ColorValue):
    """xterm 256-color palette index."""
    code: int

    RANGES: ClassVar[Mapping[str, Interval]] = {"code": BYTE}
    INTEGRAL: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class YCbCr(ColorValue):
    """Digital 8-bit studio-swing Y'CbCr (Y 16-235, chroma 16-240)."""
    y: float
    cb: float
    cr: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "y": Interval(16.0, 235.0),
        "cb": Interval(16.0, 240.0),
        "cr": Interval(16.0, 240.0),
    }
    ALIASES: ClassVar[Mapping[str, str]] = {"Y": "y", "Cb": "cb", "Cr": "cr"}


@dataclass(frozen=True, slots=True)
class XvYCC(ColorValue):
    """Extended-gamut Y'CbCr: BT.709 coding using the full 8-bit range."""
    y: float
    cb: float
    cr: float

    RANGES: ClassVar[Mapping[str, Interval]] = {"y": BYTE, "cb": BYTE, "cr": BYTE}
    ALIASES: ClassVar[Mapping[str, str]] = {"Y": "y", "Cb": "cb", "Cr": "cr"}


@dataclass(frozen=True, slots=True)
class YPbPr(ColorValue):
    """Analog component video: Y 0-1, Pb/Pr -0.5-0.5."""
    y: float
    pb: float
    pr: float

    RANGES: ClassVar[Mapping[str, Interval]] = {"y": UNIT, "pb": HALF, "pr": HALF}
    ALIASES: ClassVar[Mapping[str, str]] = {"Y": "y", "Pb": "pb", "Pr": "pr"}


@dataclass(frozen=True, slots=True)
class YDbDr(ColorValue):
    """SECAM Y 0-1, Db/Dr -1.333-1.333."""
    y: float
    db: float
    dr: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "y": UNIT,
        "db": Interval(-1.333, 1.333),
        "dr": Interval(-1.333, 1.333),
    }
    ALIASES: ClassVar[Mapping[str, str]] = {"Y": "y", "Db": "db", "Dr": "dr"}


@dataclass(frozen=True, slots=True)
class YIQ(ColorValue):
    """NTSC Y 0-1, I -0.5959-0.5959, Q -0.5227-0.5227."""
    y: float
    i: float
    q: float

    RANGES: ClassVar[Mapping[str, Interval]] = {
        "y": UNIT,
        "i": Interval(-0.5959, 0.5959),
        "q": Interval(-0.5227, 0.5227),
    }
    ALIASES: ClassVar[Mapping[str, str]] = {"Y": "y", "I": "i", "Q": "q"}


@dataclass(frozen=True, slots=True)
class YCoCg(ColorValue):
    """Luma / orange chroma / green chroma: Y 0-1, Co/Cg -0.5-0.5."""
    y: float
    co: float
    cg: float

    RANGES: ClassVar[Mapping[str, Interval]] = {"y": UNIT, "co": HALF, "cg": HALF}
    ALIASES: ClassVar[Mapping[str, str]] = {"Y": "y", "Co": "co", "Cg": "cg"}


@dataclass(frozen=True, slots=True)
class YcCbcCrc(ColorValue):
    """BT.2020 constant-luminance Y'cC'bcC'rc: Yc 0-1, chroma -0.5-0.5."""
    yc: float
    cbc: float
    crc: float

    RANGES: ClassVar[Mapping[str, Interval]] = {"yc": UNIT, "cbc": HALF, "crc": HALF}
    ALIASES: ClassVar[Mapping[str, str]] = {"Yc": "yc", "Cbc": "cbc", "Crc": "crc"}


# =============================================================================
# XYZ-Canonical Values
# =============================================================================


@dataclass(frozen=True, slots=True)
class LAB(ColorValue):
    """CIE L*a*b* (D65). Unbounded."""
    luminance: float
    a: float
    b: float

    ALIASES: ClassVar[Mapping[str, str]] = {"L": "luminance", "l": "luminance"}


@dataclass(frozen=True, slots=True)
class LCH(ColorValue):
    """Cylindrical L*C*h for either Lab (lch_ab) or Luv (lch_uv)."""
    lightness: float
    chroma: float
    hue: float

    RANGES: ClassVar[Mapping[str, Interval]] = {"chroma": NON_NEGATIVE, "hue": HUE}
    ALIASES: ClassVar[Mapping[str, str]] = {
        "L": "lightness", "l": "lightness", "c": "chroma", "C": "chroma",
        "h": "hue", "H": "hue",
    }


@dataclass(frozen=True, slots=True)
class LUV(ColorValue):
    """CIE L*u*v* (D65). Unbounded."""
    lightness: float
    u: float
    v: float

    ALIASES: ClassVar[Mapping[str, str]] = {"L": "lightness", "l": "lightness"}


@dataclass(frozen=True, slots=True)
class UVW(ColorValue):
    """CIE 1964 U*V*W*."""
    u: float
    v: float
    w: float

    ALIASES: ClassVar[Mapping[str, str]] = {"U": "u", "V": "v", "W": "w"}


@dataclass(frozen=True, slots=True)
class XYY(ColorValue):
    """CIE xyY: chromaticity (x, y) plus luminance Y (0-100)."""
    x: float
    y: float
    luminance: float

    ALIASES: ClassVar[Mapping[str, str]] = {"Y": "luminance"}


@dataclass(frozen=True, slots=True)
class LMS(ColorValue):
    """Long/medium/short cone responses (Hunt-Pointer-Estevez)."""
    long: float
    medium: float
    short: float

    ALIASES: ClassVar[Mapping[str, str]] = {
        "l": "long", "m": "medium", "s": "short",
        "L": "long", "M": "medium", "S": "short",
    }


@dataclass(frozen=True, slots=True)
class HunterLab(ColorValue):
    """Hunter 1948 L, a, b (D65)."""
    lightness: float
    a: float
    b: float

    ALIASES: ClassVar[Mapping[str, str]] = {"L": "lightness", "l": "lightness"}


# =============================================================================
# Resolved Color Record
# =============================================================================


SpaceKey = Union[ColorSpace, str]


def _space_key(space: object) -> ColorSpace:
    """Enum member or case-insensitive tag name → ColorSpace (ValueError otherwise)."""
    if isinstance(space, str):
        space = space.strip().lower()
    return ColorSpace(space)


@dataclass(frozen=True, slots=True)
class ResolvedColor:
    """
    One color, resolved into every requested representation.

    Always holds both hub values (rgb, xyz) and the source value.
    The mapping is read-only; the record is owned by whoever called resolve().

    Usage:
        color = resolve("rgb", (102, 51, 153), ["hex", "hsl"])
        color["hex"]            # Hex(code='#663399')
        color[ColorSpace.HSL]   # HSL(hue=270.0, saturation=50.0, lightness=40.0)
        color.xyz               # XYZ(...)
    """
    source: ColorSpace
    values: Mapping[ColorSpace, ColorValue]

    def __post_init__(self) -> None:
        """Validate record structure and freeze the mapping."""
        for required in (ColorSpace.RGB, ColorSpace.XYZ, self.source):
            if required not in self.values:
                raise ValueError(f"Resolved color is missing {required.value!r}")
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def __getitem__(self, space: SpaceKey) -> ColorValue:
        try:
            return self.values[_space_key(space)]
        except (KeyError, ValueError):
            raise KeyError(f"{space!r} was not resolved for this color") from None

    def __contains__(self, space: object) -> bool:
        try:
            return _space_key(space) in self.values
        except ValueError:
            return False

    def __iter__(self) -> Iterator[ColorSpace]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def get(self, space: SpaceKey, default: Optional[ColorValue] = None) -> Optional[ColorValue]:
        return self[space] if space in self else default

    @property
    def spaces(self) -> tuple[ColorSpace, ...]:
        """Resolved tags in resolution order (hubs first)."""
        return tuple(self.values)

    @property
    def rgb(self) -> RGB:
        return self.values[ColorSpace.RGB]

    @property
    def xyz(self) -> XYZ:
        return self.values[ColorSpace.XYZ]

    @property
    def web_safe(self) -> bool:
        """True if the rounded sRGB value is one of the 216 web-safe colors."""
        from tincture.convert.rgb_models import is_web_safe
        return is_web_safe(self.rgb)

    def to_dict(self, precision: Optional[int] = None) -> dict:
        """
        Serialize to dictionary keyed by tag name.

        Args:
            precision: Round float fields to this many decimals (None = exact)
        """
        return {
            "source": self.source.value,
            "values": {
                space.value: value.to_dict(precision)
                for space, value in self.values.items()
            },
        }

    def to_json(self, indent: Optional[int] = 2, precision: Optional[int] = None) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(precision), indent=indent)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ResolvedColor:
        """Deserialize from dictionary."""
        # Import here to avoid circular imports
        from tincture.convert.registry import value_type

        values = {}
        for name, raw in data["values"].items():
            space = ColorSpace(name)
            values[space] = value_type(space).from_dict(raw)
        return cls(source=ColorSpace(data["source"]), values=values)

    @classmethod
    def from_json(cls, json_str: str) -> ResolvedColor:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
