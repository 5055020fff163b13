# score, entropy_bits
# (password strength estimate)
#

import math
from enum import Enum
from collections import namedtuple

# Lower bounds (in bits, inclusive) of each label above WEAK
GOOD_BITS = 40.0
STRONG_BITS = 70.0
VERY_STRONG_BITS = 100.0

Thresholds = namedtuple('Thresholds', 'good strong very_strong')

DEFAULT_THRESHOLDS = Thresholds(GOOD_BITS, STRONG_BITS, VERY_STRONG_BITS)


class Strength(Enum):

    WEAK = 'Weak'
    GOOD = 'Good'
    STRONG = 'Strong'
    VERY_STRONG = 'Very Strong'

    def __str__(self):
        return self.value

    @property
    def level(self) -> int:
        """Position on the scale, 1 (weak) to 4 (very strong)."""
        return list(Strength).index(self) + 1


class StrengthEstimate(namedtuple('StrengthEstimate', 'entropy_bits label')):

    __slots__ = ()

    def __str__(self):
        return f"{self.label} ({self.entropy_bits:.1f} bits)"


def check_thresholds(thresholds: Thresholds) -> Thresholds:
    thresholds = Thresholds(*(float(bits) for bits in thresholds))
    if not 0 <= thresholds.good <= thresholds.strong <= thresholds.very_strong:
        raise ValueError(f"Thresholds must be non-negative and non-decreasing: {thresholds}")
    return thresholds


def entropy_bits(pool_size: int, length: int) -> float:
    """Shannon entropy of random string of `length` symbols
    drawn independently from `pool_size` symbols."""
    if pool_size < 1:
        raise ValueError(f"pool_size must be positive, got {pool_size}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    return length * math.log2(pool_size)


def label_for(bits: float, thresholds: Thresholds = DEFAULT_THRESHOLDS) -> Strength:
    if bits >= thresholds.very_strong:
        return Strength.VERY_STRONG
    if bits >= thresholds.strong:
        return Strength.STRONG
    if bits >= thresholds.good:
        return Strength.GOOD
    return Strength.WEAK


def score(pool_size: int, length: int, thresholds=None) -> StrengthEstimate:
    """Estimate strength of password generated from `pool_size` characters.

    :param thresholds: Override DEFAULT_THRESHOLDS (good, strong, very_strong)
    :returns: StrengthEstimate(entropy_bits, label)

    """
    if thresholds is None:
        thresholds = DEFAULT_THRESHOLDS
    else:
        thresholds = check_thresholds(thresholds)
    bits = entropy_bits(pool_size, length)
    return StrengthEstimate(bits, label_for(bits, thresholds))
