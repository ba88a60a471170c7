from .default import value_or_default, value_or_factory
from .num_utils import np_round_half_away, np_to_channels, round_half_away, to_channel

__all__ = [
    "value_or_default",
    "value_or_factory",
    "round_half_away",
    "np_round_half_away",
    "to_channel",
    "np_to_channels",
]
