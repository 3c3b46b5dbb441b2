# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Conversion core for Tincture.

This module provides the registry-driven resolver, chromatic adaptation
and color difference metrics. All operations are pure and stateless.
"""

from tincture.convert.adaptation import (
    ADAPTATION_MATRICES,
    adapt,
    adapt_named,
    adapt_with_matrix,
    adaptation_matrix,
)
from tincture.convert.constants import Illuminant
from tincture.convert.difference import (
    PERCEPTIBLE_THROUGH_CLOSE_OBSERVATION,
    comparative_distance,
    delta_e_cie76,
    delta_e_cie76_rgb,
    delta_e_cie2000,
    delta_e_cie2000_rgb,
)
from tincture.convert.registry import REGISTRY, lookup, registered_spaces
from tincture.convert.resolver import DEFAULT_SPACES, ResolveConfig, convert, resolve
from tincture.convert.validate import normalize, parse_hex

__all__ = [
    # Resolution
    "resolve",
    "convert",
    "ResolveConfig",
    "DEFAULT_SPACES",
    # Registry
    "REGISTRY",
    "lookup",
    "registered_spaces",
    # Validation
    "normalize",
    "parse_hex",
    # Adaptation
    "Illuminant",
    "ADAPTATION_MATRICES",
    "adaptation_matrix",
    "adapt",
    "adapt_named",
    "adapt_with_matrix",
    # Difference
    "comparative_distance",
    "delta_e_cie76",
    "delta_e_cie2000",
    "delta_e_cie76_rgb",
    "delta_e_cie2000_rgb",
    "PERCEPTIBLE_THROUGH_CLOSE_OBSERVATION",
]
