# SPDX-FileCopyrightText: 2026 Giovanni MARIANO
#
# SPDX-License-Identifier: MPL-2.0

"""
Uniform sampling of points, directions and rays.

All functions take ``rng``: a ``numpy.random.Generator``, or a seed / None
passed to ``numpy.random.default_rng``.
"""

from __future__ import annotations
from typing import Optional, Union
import math

import numpy as np

from .surfaces import Box
from .vector import Ray, Vector, unitize

RngLike = Union[np.random.Generator, int, None]


def _generator(rng: RngLike) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def random_point(box: Box, rng: RngLike = None) -> Vector:
    """Point uniformly distributed inside ``box``."""
    gen = _generator(rng)
    lo = np.array(tuple(box.lower_left))
    width = np.array(tuple(box.dimensions))
    x, y, z = lo + gen.random(3) * width
    return Vector(float(x), float(y), float(z))


def random_direction(rng: RngLike = None) -> Vector:
    """Unit vector uniformly distributed on the sphere."""
    gen = _generator(rng)
    theta = gen.random() * 2.0 * math.pi
    z = -1.0 + 2.0 * gen.random()
    zo = math.sqrt(1.0 - z * z)
    return unitize(Vector(zo * math.cos(theta), zo * math.sin(theta), z))


def generate_random_ray(box: Box, rng: RngLike = None) -> Ray:
    """Ray with a uniform origin in ``box`` and an isotropic direction."""
    gen = _generator(rng)
    return Ray(random_point(box, gen), random_direction(gen))
