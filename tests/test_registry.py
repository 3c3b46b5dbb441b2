# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""Tests for the conversion registry."""

import numpy as np
import pytest

from tincture.errors import UnknownSpaceError
from tincture.schema import LCH, RGB, XYZ, ColorSpace, Hub
from tincture.convert.colorspace import srgb_to_xyz
from tincture.convert.registry import (
    HUB_VALUE_TYPES,
    REGISTRY,
    ConversionEntry,
    _ENTRIES,
    _check_registry,
    lookup,
    registered_spaces,
    space_tag,
    value_type,
)


LEAVES = [space for space in ColorSpace if not space.is_hub]
# Palette spaces only round-trip palette colors
LOSSY = {ColorSpace.ANSI16, ColorSpace.ANSI256}

SAMPLE_RGB = [
    RGB(102.0, 51.0, 153.0),
    RGB(255.0, 255.0, 255.0),
    RGB(0.0, 0.0, 0.0),
    RGB(200.0, 30.0, 60.0),
]


class TestCoverage:

    def test_every_leaf_registered_once(self):
        assert set(REGISTRY) == set(LEAVES)
        assert len(_ENTRIES) == len(LEAVES)

    def test_hubs_not_registered(self):
        assert ColorSpace.RGB not in REGISTRY
        assert ColorSpace.XYZ not in REGISTRY

    def test_hub_value_types(self):
        assert HUB_VALUE_TYPES[Hub.RGB] is RGB
        assert HUB_VALUE_TYPES[Hub.XYZ] is XYZ

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            REGISTRY[ColorSpace.HEX] = REGISTRY[ColorSpace.HSL]

    @pytest.mark.parametrize("space,hub", [
        (ColorSpace.HEX, Hub.RGB),
        (ColorSpace.CMYK, Hub.RGB),
        (ColorSpace.YCBCR_BT709, Hub.RGB),
        (ColorSpace.LAB, Hub.XYZ),
        (ColorSpace.XYY, Hub.XYZ),
        (ColorSpace.LMS, Hub.XYZ),
        (ColorSpace.PRO_PHOTO_RGB, Hub.XYZ),
    ])
    def test_canonical_hub(self, space, hub):
        assert lookup(space).hub is hub

    def test_registered_spaces(self):
        spaces = registered_spaces()
        assert spaces[:2] == (ColorSpace.RGB, ColorSpace.XYZ)
        assert set(spaces) == set(ColorSpace)
        assert len(spaces) == len(ColorSpace)


class TestLookup:

    def test_by_string(self):
        assert lookup("lab") is REGISTRY[ColorSpace.LAB]

    def test_case_insensitive(self):
        assert lookup("LCH_AB") is REGISTRY[ColorSpace.LCH_AB]

    def test_unknown(self):
        with pytest.raises(UnknownSpaceError, match="oklch"):
            lookup("oklch")

    def test_hub_has_no_entry(self):
        with pytest.raises(UnknownSpaceError):
            lookup("rgb")

    def test_space_tag_rejects_non_strings(self):
        with pytest.raises(UnknownSpaceError):
            space_tag(None)

    def test_value_type(self):
        assert value_type("rgb") is RGB
        assert value_type(ColorSpace.XYZ) is XYZ
        assert value_type("lch_uv") is LCH
        assert value_type("adobe_98_rgb") is RGB


class TestRoundtrip:
    """to_hub(from_hub(hub)) reproduces the hub value for every leaf."""

    @pytest.mark.parametrize("space", [s for s in LEAVES if s not in LOSSY], ids=lambda s: s.value)
    def test_leaf_roundtrip(self, space):
        entry = lookup(space)
        for rgb in SAMPLE_RGB:
            hub = rgb if entry.hub is Hub.RGB else srgb_to_xyz(rgb)
            leaf = entry.from_hub(hub)
            assert isinstance(leaf, entry.value_type)
            recovered = entry.to_hub(leaf)
            np.testing.assert_allclose(recovered.as_tuple(), hub.as_tuple(), atol=1e-6)

    @pytest.mark.parametrize("space", sorted(LOSSY, key=lambda s: s.value), ids=lambda s: s.value)
    def test_palette_roundtrip(self, space):
        """Palette colors themselves survive the round trip."""
        entry = lookup(space)
        palette_rgb = entry.to_hub(entry.from_hub(RGB(255.0, 0.0, 0.0)))
        assert entry.to_hub(entry.from_hub(palette_rgb)) == palette_rgb


class TestSelfCheck:

    def test_missing_entry(self):
        with pytest.raises(RuntimeError, match="Missing"):
            _check_registry(_ENTRIES[:-1])

    def test_duplicate_entry(self):
        with pytest.raises(RuntimeError, match="Duplicate"):
            _check_registry(_ENTRIES + (_ENTRIES[0],))

    def test_hub_entry(self):
        identity = ConversionEntry(ColorSpace.RGB, RGB, Hub.RGB, lambda v: v, lambda v: v)
        with pytest.raises(RuntimeError, match="Hub"):
            _check_registry(_ENTRIES + (identity,))

    def test_valid_table(self):
        assert dict(_check_registry(_ENTRIES)) == dict(REGISTRY)
