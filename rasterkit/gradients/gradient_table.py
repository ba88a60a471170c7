from __future__ import annotations

import math
from typing import Tuple, Union

import numpy as np
from numpy import ndarray as NDArray

from ..colors.rgb import ColorRGBA, as_rgba
from ..errors import InvalidDomainError
from ..utils.num_utils import np_to_channels, to_channel


class GradientTable:
    """
    Linear color ramp over a radius domain ``[0, domain_radius]``.

    Stores the start color as floats plus a per-unit-distance delta for each
    RGBA channel, so the color at any radius is one multiply-add per channel.
    Rounding (half away from zero) happens only when a color is produced.

    Radii outside the domain extrapolate; :meth:`channels_at` returns the raw
    values, :meth:`color_at` clamps them into 8-bit channels.
    """

    __slots__ = ("_base", "_delta", "_domain_radius")

    def __init__(self, base: Tuple[float, ...], delta: Tuple[float, ...], domain_radius: float) -> None:
        self._base = base
        self._delta = delta
        self._domain_radius = domain_radius

    @classmethod
    def build(
        cls,
        from_color: Union[ColorRGBA, Tuple[int, ...]],
        to_color: Union[ColorRGBA, Tuple[int, ...]],
        domain_radius: float,
    ) -> "GradientTable":
        """
        Precompute the ramp between two colors.

        Args:
            from_color: Color at radius 0
            to_color: Color at ``domain_radius``
            domain_radius: Length of the ramp, must be > 0

        Raises:
            InvalidDomainError: If ``domain_radius`` is not a positive finite number.
        """
        domain_radius = float(domain_radius)
        if not (domain_radius > 0) or math.isinf(domain_radius):
            raise InvalidDomainError(domain_radius)

        start = tuple(float(c) for c in as_rgba(from_color).value)
        end = tuple(float(c) for c in as_rgba(to_color).value)
        delta = tuple((e - s) / domain_radius for s, e in zip(start, end))
        return cls(start, delta, domain_radius)

    @property
    def base(self) -> Tuple[float, ...]:
        return self._base

    @property
    def per_unit_delta(self) -> Tuple[float, ...]:
        return self._delta

    @property
    def domain_radius(self) -> float:
        return self._domain_radius

    def channels_at(self, radius: float) -> Tuple[float, ...]:
        return tuple(b + d * radius for b, d in zip(self._base, self._delta))

    def color_at(self, radius: float) -> ColorRGBA:
        return ColorRGBA(tuple(to_channel(c) for c in self.channels_at(radius)))

    def np_colors_at(self, radii: NDArray) -> NDArray:
        """
        Vectorized :meth:`color_at`.

        Args:
            radii: Array of radii with any shape ``S``

        Returns:
            uint8 array of shape ``S + (4,)``
        """
        radii = np.asarray(radii, dtype=np.float64)
        base = np.array(self._base, dtype=np.float64)
        delta = np.array(self._delta, dtype=np.float64)
        return np_to_channels(base + delta * radii[..., None])

    def __repr__(self) -> str:
        return (
            f"GradientTable(base={self._base!r}, per_unit_delta={self._delta!r}, "
            f"domain_radius={self._domain_radius!r})"
        )
