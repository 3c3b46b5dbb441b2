# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Exceptions raised by Tincture.

Every exception also derives from the built-in it refines (ValueError,
KeyError) so callers can catch either the Tincture type or the builtin.
"""


class TinctureError(Exception):
    """Base exception for all Tincture errors."""


class InvalidInputError(TinctureError, ValueError):
    """A raw color value failed shape or range validation."""

    def __init__(self, space: str, message: str) -> None:
        super().__init__(f"Invalid {space} value: {message}")
        self.space = space


class UnknownSpaceError(TinctureError, KeyError):
    """A color space tag is not present in the conversion registry."""

    def __init__(self, space: object) -> None:
        super().__init__(f"Unknown color space: {space!r}")
        self.space = space

    def __str__(self) -> str:
        return str(self.args[0])


class UnknownIlluminantError(TinctureError, KeyError):
    """A reference white or adaptation pair is outside the illuminant catalogue."""

    def __init__(self, name: object) -> None:
        super().__init__(f"Unknown illuminant or adaptation pair: {name!r}")
        self.name = name

    def __str__(self) -> str:
        return str(self.args[0])
