# Copyright (c) 2026 Tincture
# SPDX-License-Identifier: MIT

"""
Color difference metrics.

Delta E values are computed in CIE L*a*b* (D65). A CIEDE2000 difference of
about 2 is the smallest a trained observer reliably notices side by side.

References:
- http://brucelindbloom.com/Eqn_DeltaE_CIE76.html
- Sharma, Wu, Dalal (2005), "The CIEDE2000 Color-Difference Formula:
  Implementation Notes, Supplementary Test Data, and Mathematical Observations"
"""

from __future__ import annotations

import math

import numpy as np

from tincture.schema import LAB, RGB
from tincture.convert.colorspace import srgb_to_xyz
from tincture.convert.xyz_models import xyz_to_lab

PERCEPTIBLE_THROUGH_CLOSE_OBSERVATION = 2.0

_POW25_7 = 25.0 ** 7


def comparative_distance(rgb1: RGB, rgb2: RGB) -> int:
    """
    Euclidean distance between two sRGB colors in 0-255 channel space.

    Rounded half up to the nearest integer. Cheap, but not perceptual.
    """
    delta = np.subtract(rgb1.as_tuple(), rgb2.as_tuple())
    return int(math.floor(float(np.sqrt(np.sum(delta ** 2))) + 0.5))


def delta_e_cie76(lab1: LAB, lab2: LAB) -> float:
    """CIE 1976 ΔE*ab: Euclidean distance in L*a*b*."""
    delta = np.subtract(lab1.as_tuple(), lab2.as_tuple())
    return float(np.sqrt(np.sum(delta ** 2)))


def delta_e_cie2000(
    lab1: LAB,
    lab2: LAB,
    k_l: float = 1.0,
    k_c: float = 1.0,
    k_h: float = 1.0,
) -> float:
    """
    CIEDE2000 ΔE00.

    Args:
        lab1: Reference color
        lab2: Sample color
        k_l: Lightness weighting factor
        k_c: Chroma weighting factor
        k_h: Hue weighting factor

    Example:
        >>> delta_e_cie2000(LAB(50, 2.6772, -79.7751), LAB(50, 0, -82.7485))
        2.0425...
    """
    l1, a1, b1 = lab1.as_tuple()
    l2, a2, b2 = lab2.as_tuple()

    # a* rescaling toward neutral
    c_bar = (math.hypot(a1, b1) + math.hypot(a2, b2)) / 2.0
    g = 0.5 * (1.0 - math.sqrt(c_bar ** 7 / (c_bar ** 7 + _POW25_7)))
    a1_prime = (1.0 + g) * a1
    a2_prime = (1.0 + g) * a2

    c1_prime = math.hypot(a1_prime, b1)
    c2_prime = math.hypot(a2_prime, b2)
    h1_prime = math.degrees(math.atan2(b1, a1_prime)) % 360.0 if c1_prime else 0.0
    h2_prime = math.degrees(math.atan2(b2, a2_prime)) % 360.0 if c2_prime else 0.0

    delta_l = l2 - l1
    delta_c = c2_prime - c1_prime

    chroma_product = c1_prime * c2_prime
    if chroma_product == 0:
        delta_h = 0.0
    else:
        delta_h = h2_prime - h1_prime
        if delta_h > 180.0:
            delta_h -= 360.0
        elif delta_h < -180.0:
            delta_h += 360.0
    delta_big_h = 2.0 * math.sqrt(chroma_product) * math.sin(math.radians(delta_h / 2.0))

    l_bar = (l1 + l2) / 2.0
    c_bar_prime = (c1_prime + c2_prime) / 2.0
    hue_sum = h1_prime + h2_prime
    if chroma_product == 0:
        h_bar = hue_sum
    elif abs(h1_prime - h2_prime) <= 180.0:
        h_bar = hue_sum / 2.0
    elif hue_sum < 360.0:
        h_bar = (hue_sum + 360.0) / 2.0
    else:
        h_bar = (hue_sum - 360.0) / 2.0

    t = (
        1.0
        - 0.17 * math.cos(math.radians(h_bar - 30.0))
        + 0.24 * math.cos(math.radians(2.0 * h_bar))
        + 0.32 * math.cos(math.radians(3.0 * h_bar + 6.0))
        - 0.20 * math.cos(math.radians(4.0 * h_bar - 63.0))
    )
    delta_theta = 30.0 * math.exp(-(((h_bar - 275.0) / 25.0) ** 2))
    r_c = 2.0 * math.sqrt(c_bar_prime ** 7 / (c_bar_prime ** 7 + _POW25_7))
    s_l = 1.0 + 0.015 * (l_bar - 50.0) ** 2 / math.sqrt(20.0 + (l_bar - 50.0) ** 2)
    s_c = 1.0 + 0.045 * c_bar_prime
    s_h = 1.0 + 0.015 * c_bar_prime * t
    r_t = -math.sin(math.radians(2.0 * delta_theta)) * r_c

    lightness_term = delta_l / (k_l * s_l)
    chroma_term = delta_c / (k_c * s_c)
    hue_term = delta_big_h / (k_h * s_h)
    return math.sqrt(
        lightness_term ** 2
        + chroma_term ** 2
        + hue_term ** 2
        + r_t * chroma_term * hue_term
    )


def _srgb_to_lab(rgb: RGB) -> LAB:
    return xyz_to_lab(srgb_to_xyz(rgb))


def delta_e_cie76_rgb(rgb1: RGB, rgb2: RGB) -> float:
    """CIE76 difference between two sRGB colors."""
    return delta_e_cie76(_srgb_to_lab(rgb1), _srgb_to_lab(rgb2))


def delta_e_cie2000_rgb(rgb1: RGB, rgb2: RGB) -> float:
    """CIEDE2000 difference between two sRGB colors."""
    return delta_e_cie2000(_srgb_to_lab(rgb1), _srgb_to_lab(rgb2))
