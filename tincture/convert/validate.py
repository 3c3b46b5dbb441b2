# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Input validation: raw user input → typed color value.

``normalize`` is the only way raw input becomes a value the resolver will
accept. Everything past this point assumes range-valid values.

Accepted raw shapes:
- an instance of the space's value class (re-validated)
- a mapping keyed by field names or their short aliases
- a positional sequence in declared field order
- for single-field spaces (ansi16, ansi256): a bare number
- for hex only: a string "#rgb" or "#rrggbb", with or without "#"
"""

from __future__ import annotations

import math
import re
from numbers import Real
from typing import Any, Mapping, Sequence, Union

import numpy as np

from tincture.errors import InvalidInputError
from tincture.schema import ColorSpace, ColorValue, Hex
from tincture.convert.registry import space_tag, value_type

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def parse_hex(text: str) -> Hex:
    """
    Parse a hex color code.

    Accepts "#rgb", "#rrggbb", "rgb" and "rrggbb" (any case) and returns
    the canonical lowercase "#rrggbb" form.

    Raises:
        InvalidInputError: If the text is not a 3- or 6-digit hex code
    """
    if not isinstance(text, str):
        raise InvalidInputError("hex", f"expected a string, got {type(text).__name__}")
    match = _HEX_PATTERN.fullmatch(text.strip())
    if match is None:
        raise InvalidInputError("hex", f"{text!r} is not a valid hex string")
    digits = match.group(1).lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return Hex(code=f"#{digits}")


def _number(space: ColorSpace, name: str, raw: Any, integral: bool) -> Union[int, float]:
    if isinstance(raw, bool) or not isinstance(raw, Real):
        raise InvalidInputError(space.value, f"{name} must be a number, got {raw!r}")
    value = float(raw)
    if not math.isfinite(value):
        raise InvalidInputError(space.value, f"{name} must be finite, got {raw!r}")
    if integral:
        if not value.is_integer():
            raise InvalidInputError(space.value, f"{name} must be a whole number, got {raw!r}")
        return int(value)
    return value


def _fields_from_mapping(space: ColorSpace, cls: type[ColorValue], raw: Mapping) -> dict:
    names = cls.field_names()
    collected: dict[str, Any] = {}
    for key, item in raw.items():
        name = key if key in names else cls.ALIASES.get(key)
        if name is None:
            raise InvalidInputError(space.value, f"unknown field {key!r}")
        if name in collected:
            raise InvalidInputError(space.value, f"field {name!r} given more than once")
        collected[name] = item

    missing = [name for name in names if name not in collected]
    if missing:
        raise InvalidInputError(space.value, f"missing field(s) {', '.join(missing)}")
    return collected


def _fields_from_sequence(space: ColorSpace, cls: type[ColorValue], raw: Sequence) -> dict:
    names = cls.field_names()
    if len(raw) != len(names):
        raise InvalidInputError(
            space.value,
            f"expected {len(names)} components ({', '.join(names)}), got {len(raw)}",
        )
    return dict(zip(names, raw))


def _normalize_hex(raw: Any) -> Hex:
    if isinstance(raw, Hex):
        return parse_hex(raw.code)
    if isinstance(raw, str):
        return parse_hex(raw)
    if isinstance(raw, Mapping):
        return parse_hex(_fields_from_mapping(ColorSpace.HEX, Hex, raw)["code"])
    if isinstance(raw, Sequence):
        return parse_hex(_fields_from_sequence(ColorSpace.HEX, Hex, raw)["code"])
    raise InvalidInputError("hex", f"unsupported input type {type(raw).__name__}")


def normalize(space: Union[ColorSpace, str], raw: Any) -> ColorValue:
    """
    Validate raw input and build the typed value for ``space``.

    Args:
        space: Source color space tag (enum or string)
        raw: Value instance, mapping, sequence, or hex string

    Returns:
        A value of the class registered for ``space``

    Raises:
        UnknownSpaceError: If ``space`` is not a registered tag
        InvalidInputError: If the value has the wrong shape or is out of range

    Example:
        >>> normalize("rgb", {"r": 102, "g": 51, "b": 153})
        RGB(red=102.0, green=51.0, blue=153.0)
    """
    tag = space_tag(space)
    cls = value_type(tag)

    if cls is Hex:
        return _normalize_hex(raw)

    if isinstance(raw, cls):
        data = dict(zip(cls.field_names(), raw.as_tuple()))
    elif isinstance(raw, ColorValue):
        raise InvalidInputError(
            tag.value, f"expected {cls.__name__}, got {type(raw).__name__}",
        )
    elif isinstance(raw, Mapping):
        data = _fields_from_mapping(tag, cls, raw)
    elif len(cls.field_names()) == 1 and isinstance(raw, Real) and not isinstance(raw, bool):
        data = {cls.field_names()[0]: raw}
    elif isinstance(raw, Sequence) and not isinstance(raw, str):
        data = _fields_from_sequence(tag, cls, raw)
    elif isinstance(raw, np.ndarray):
        data = _fields_from_sequence(tag, cls, raw.tolist())
    else:
        raise InvalidInputError(tag.value, f"unsupported input type {type(raw).__name__}")

    values = {}
    for name in cls.field_names():
        number = _number(tag, name, data[name], cls.INTEGRAL)
        interval = cls.RANGES.get(name)
        if interval is not None and not interval.contains(number):
            raise InvalidInputError(
                tag.value, f"{name} must be in {interval.describe()}, got {number:g}",
            )
        values[name] = number

    value = cls(**values)
    try:
        value.check()
    except ValueError as e:
        raise InvalidInputError(tag.value, str(e)) from None
    return value
