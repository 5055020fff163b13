# CharacterClass, build_pool
# (character classes and the pool built from them)
#

from enum import Enum


class CharacterClass(Enum):

    """Character class with its literal alphabet.

    Alphabets are disjoint. Declaration order is the pool order.

    """

    UPPER = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
    LOWER = 'abcdefghijklmnopqrstuvwxyz'
    DIGIT = '0123456789'
    SYMBOL = '!@#$%^&*()_+~`|}{[]:;?><,./-='

    @property
    def alphabet(self) -> str:
        return self.value

    @property
    def short_name(self) -> str:
        return self.name.lower()


ALL_CLASSES = frozenset(CharacterClass)

# Extra names accepted on command line and in config file
CLASS_ALIASES = {
    'uppercase': CharacterClass.UPPER,
    'lowercase': CharacterClass.LOWER,
    'digits': CharacterClass.DIGIT,
    'numbers': CharacterClass.DIGIT,
    'symbols': CharacterClass.SYMBOL,
}


def class_names() -> list:
    return [cls.short_name for cls in CharacterClass]


def parse_class(name: str) -> CharacterClass:
    """Find character class by `name`.

    Accepts the short name (`upper`), an alias (`digits`)
    or a unique prefix of either (`up`, `sym`).

    :raises ValueError: for unknown or ambiguous name

    """
    name = name.strip().lower()
    names = {cls.short_name: cls for cls in CharacterClass}
    names.update(CLASS_ALIASES)
    if name in names:
        return names[name]
    candidates = set(cls for key, cls in names.items()
                     if name and key.startswith(name))
    if len(candidates) != 1:
        raise ValueError("Unknown or ambiguous character class: " + name)
    return candidates.pop()


def build_pool(classes) -> str:
    """Concatenate alphabets of enabled `classes`.

    The order is fixed (upper, lower, digit, symbol), independent
    of the order of `classes`. Empty input gives empty pool.

    """
    return ''.join(cls.alphabet for cls in CharacterClass if cls in classes)
