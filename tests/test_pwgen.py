import math

import pytest

from passgen import pwgen
from passgen.charset import CharacterClass, ALL_CLASSES, build_pool
from passgen.strength import Strength


def test_generate_password():
    pw = pwgen.generate_password(length=50)
    assert len(pw) == 50
    assert all(c.isprintable() for c in pw)
    assert not any(c.isspace() for c in pw), "No whitespace"


@pytest.mark.parametrize('classes', [
    {CharacterClass.UPPER},
    {CharacterClass.DIGIT},
    {CharacterClass.SYMBOL},
    {CharacterClass.LOWER, CharacterClass.DIGIT},
    ALL_CLASSES,
])
@pytest.mark.parametrize('length', [0, 1, 7, 64, 200])
def test_generate_shape(classes, length):
    pool = build_pool(classes)
    password, estimate = pwgen.generate(pwgen.Config(length, classes))
    assert len(password) == length
    assert all(c in pool for c in password)
    assert estimate.entropy_bits == pytest.approx(length * math.log2(len(pool)))


def test_generate_uses_all_classes():
    # 1000 draws from 91 characters, every class is hit with overwhelming probability
    password = pwgen.generate_password(1000)
    for cls in CharacterClass:
        assert any(c in cls.alphabet for c in password), cls


def test_generate_differs():
    config = pwgen.Config(32)
    passwords = {pwgen.generate(config).password for _ in range(20)}
    assert len(passwords) == 20
    assert all(len(pw) == 32 for pw in passwords)


def test_empty_pool(monkeypatch):
    def forbidden(*_args, **_kwargs):
        raise AssertionError("sampler must not be called")
    monkeypatch.setattr(pwgen, 'secure_random_index', forbidden)
    with pytest.raises(pwgen.EmptyPoolError):
        pwgen.generate(pwgen.Config(16, ()))
    with pytest.raises(pwgen.EmptyPoolError):
        pwgen.generate(pwgen.Config(0, frozenset()))


def test_empty_pool_is_value_error():
    with pytest.raises(ValueError, match="No character classes selected"):
        pwgen.generate(pwgen.Config(classes=set()))


def test_negative_length():
    with pytest.raises(ValueError):
        pwgen.generate(pwgen.Config(-1))


def test_draw_order(monkeypatch):
    indices = iter([0, 25, 26, 1])
    monkeypatch.setattr(pwgen, 'secure_random_index', lambda pool_size: next(indices))
    config = pwgen.Config(4, {CharacterClass.UPPER, CharacterClass.LOWER})
    assert pwgen.generate(config).password == 'AZab'


def test_strength():
    config = pwgen.Config(16, ALL_CLASSES)
    _, estimate = pwgen.generate(config)
    assert estimate.label == Strength.VERY_STRONG
    assert estimate.entropy_bits == pytest.approx(104.12, abs=0.01)
    _, estimate = pwgen.generate(config.with_length(8))
    assert estimate.label == Strength.GOOD
    _, estimate = pwgen.generate(config, thresholds=(10, 20, 200))
    assert estimate.label == Strength.STRONG


class TestConfig:

    def test_default(self):
        config = pwgen.Config()
        assert config.length == pwgen.DEFAULT_LENGTH
        assert config.classes == ALL_CLASSES

    def test_immutable(self):
        config = pwgen.Config(10)
        other = config.with_length(20).without_class(CharacterClass.SYMBOL)
        assert config.length == 10
        assert config.classes == ALL_CLASSES
        assert other.length == 20
        assert CharacterClass.SYMBOL not in other.classes
        with pytest.raises(AttributeError):
            config.length = 5

    def test_toggle(self):
        config = pwgen.Config(8, {CharacterClass.DIGIT})
        assert config.toggle(CharacterClass.DIGIT).classes == frozenset()
        assert config.toggle(CharacterClass.UPPER).classes == \
            {CharacterClass.DIGIT, CharacterClass.UPPER}

    def test_eq(self):
        assert pwgen.Config(8, [CharacterClass.DIGIT]) == pwgen.Config(8, {CharacterClass.DIGIT})
        assert pwgen.Config(8) != pwgen.Config(9)
        assert len({pwgen.Config(), pwgen.Config()}) == 1

    def test_repr(self):
        config = pwgen.Config(8, {CharacterClass.SYMBOL, CharacterClass.UPPER})
        assert repr(config) == "Config(length=8, classes=upper,symbol)"
