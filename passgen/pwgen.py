# pwgen
# (random password generator)
#

import logging
from collections import namedtuple

from .charset import CharacterClass, ALL_CLASSES, build_pool
from .sampler import secure_random_index
from . import strength

DEFAULT_LENGTH = 16
# Range offered by the UI, generate() accepts any length >= 0
MIN_LENGTH = 4
MAX_LENGTH = 64

log = logging.getLogger(__name__)


class EmptyPoolError(ValueError):

    """No character class selected, the pool is empty."""

    def __init__(self, msg="No character classes selected"):
        ValueError.__init__(self, msg)


class Config:

    """Immutable generator configuration.

    Methods `with_*` / `without_*` return modified copy.

    """

    __slots__ = ('_length', '_classes')

    def __init__(self, length: int = DEFAULT_LENGTH, classes=ALL_CLASSES):
        self._length = int(length)
        self._classes = frozenset(classes)

    def __repr__(self):
        names = ','.join(cls.short_name for cls in CharacterClass
                         if cls in self._classes)
        return f"{self.__class__.__name__}(length={self._length}, classes={names})"

    def __eq__(self, other):
        if not isinstance(other, Config):
            return NotImplemented
        return (self._length, self._classes) == (other._length, other._classes)

    def __hash__(self):
        return hash((self._length, self._classes))

    @property
    def length(self) -> int:
        return self._length

    @property
    def classes(self) -> frozenset:
        return self._classes

    def with_length(self, length: int) -> 'Config':
        return Config(length, self._classes)

    def with_class(self, cls: CharacterClass) -> 'Config':
        return Config(self._length, self._classes | {cls})

    def without_class(self, cls: CharacterClass) -> 'Config':
        return Config(self._length, self._classes - {cls})

    def toggle(self, cls: CharacterClass) -> 'Config':
        if cls in self._classes:
            return self.without_class(cls)
        return self.with_class(cls)


Generated = namedtuple('Generated', 'password strength')


def generate(config: Config, thresholds=None) -> Generated:
    """Generate random password according to `config`.

    Each character is drawn independently from the pool
    of all enabled character classes (repetition allowed).

    :param thresholds: Override strength thresholds, see `strength.score`
    :returns: Generated(password, strength)
    :raises EmptyPoolError: when no character class is enabled

    """
    if config.length < 0:
        raise ValueError(f"length must not be negative, got {config.length}")
    pool = build_pool(config.classes)
    if not pool:
        raise EmptyPoolError()
    password = ''.join(pool[secure_random_index(len(pool))]
                       for _ in range(config.length))
    estimate = strength.score(len(pool), config.length, thresholds)
    log.debug("generated: pool=%d length=%d entropy=%.1f",
              len(pool), config.length, estimate.entropy_bits)
    return Generated(password, estimate)


def generate_password(length: int = DEFAULT_LENGTH, classes=ALL_CLASSES) -> str:
    """Generate random password containing letters, digits and symbols."""
    return generate(Config(length, classes)).password


if __name__ == '__main__':
    for _ in range(10):
        print(*generate(Config()), sep='   ')
