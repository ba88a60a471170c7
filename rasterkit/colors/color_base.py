from __future__ import annotations
from typing import Any, ClassVar, Iterator, Tuple, cast, Self
from abc import ABC
from numpy import ndarray
import numpy as np
from ..types.color_types import IntVector, ScalarVector, CHANNEL_MAX


class ColorBase:
    __slots__ = ('_value',)  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 1
    mode:       ClassVar[str]
    maxima:     ClassVar[IntVector]
    null_value: ClassVar[IntVector]
    _is_frozen: bool = False   # class-level default (instance gets its own slot)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: Any) -> None:
        if len(self.maxima) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            value = value.value

        # ---- Handle array input ----
        if isinstance(value, ndarray):
            if value.shape != (self.num_channels,):
                raise ValueError(
                    f"{self.mode} expects shape ({self.num_channels},), got shape {value.shape}"
                )
            value = tuple(value.tolist())

        # ---- Handle tuple input ----
        try:
            values = tuple(cast(ScalarVector, value))
        except TypeError:
            raise TypeError(f"{self.mode} expects a {self.num_channels}-channel sequence, got {value!r}") from None
        if len(values) != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.num_channels} channels, got {len(values)}")

        # type enforcement + clamp
        clamped = []
        for v, m in zip(values, self.maxima):
            if isinstance(v, (bool, np.bool_)) or not isinstance(v, (int, float, np.integer, np.floating)):
                raise TypeError(f"{self.mode} channel values must be numbers, got {v!r}")
            clamped.append(max(0, min(int(v), m)))

        # safe assignment; __setattr__ still allows it during init
        self._value = tuple(clamped)

        # frozen after construction
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> IntVector:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    def to_array(self) -> ndarray:
        return np.array(self._value, dtype=np.uint8)

    def __iter__(self) -> Iterator[int]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_channels

    def __getitem__(self, index: int) -> int:
        return self._value[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ColorBase):
            return self.mode == other.mode and self._value == other._value
        if isinstance(other, tuple):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        # equal to the plain tuple, so hash like it
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._value!r})"


class WithAlpha(ABC):
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    # Tell static checkers these come from the real subclass (ColorBase)
    num_channels: ClassVar[int]
    value: IntVector

    alpha_index: ClassVar[int] = -1
    alpha_max:   ClassVar[int] = CHANNEL_MAX

    @property
    def alpha(self) -> int:
        return self.value[self.alpha_index]

    @property
    def is_opaque(self) -> bool:
        return self.alpha == self.alpha_max

    @property
    def is_transparent(self) -> bool:
        return self.alpha == 0

    def with_alpha(self, alpha: int) -> Self:
        """
        Return a new instance with modified alpha channel.

        Args:
            alpha: New alpha value, clamped to ``[0, alpha_max]``.

        Returns:
            New color instance with updated alpha.
        """
        a = max(0, min(int(alpha), self.alpha_max))
        return self.__class__(self.value[:-1] + (a,))  # type: ignore

