"""Tests for the passgen core."""

import random

import pytest

from passgen import (
    CharacterClass,
    ColorTier,
    Configuration,
    InvalidLength,
    NoClassSelected,
    StrengthLabel,
    estimate_entropy,
    generate,
    score,
)


# ── Fixtures / helpers ─────────────────────────────────────────────────────

ALL = list(CharacterClass)

SUBSETS = [
    [CharacterClass.UPPER],
    [CharacterClass.LOWER],
    [CharacterClass.DIGIT],
    [CharacterClass.SYMBOL],
    [CharacterClass.UPPER, CharacterClass.DIGIT],
    [CharacterClass.LOWER, CharacterClass.SYMBOL],
    [CharacterClass.UPPER, CharacterClass.LOWER, CharacterClass.DIGIT],
    ALL,
]


@pytest.fixture
def rng():
    return random.Random(1234)


def _config(length, classes):
    return Configuration.from_classes(length, classes)


# ── Configuration ──────────────────────────────────────────────────────────


class TestConfiguration:
    def test_defaults(self):
        config = Configuration()
        assert config.length == 12
        assert config.classes == ALL

    def test_canonical_alphabet_order(self):
        config = _config(8, [CharacterClass.SYMBOL, CharacterClass.UPPER])
        assert config.classes == [CharacterClass.UPPER, CharacterClass.SYMBOL]
        assert config.alphabet == (
            "ABCDEFGHIJKLMNOPQRSTUVWXYZ" + "!@#$%^&*()_+[]{}<>?/|~"
        )

    def test_empty_is_constructible(self):
        config = _config(10, [])
        assert config.classes == []
        assert config.alphabet == ""


# ── generate ───────────────────────────────────────────────────────────────


class TestGenerate:
    def test_default_length(self):
        assert len(generate()) == 12

    @pytest.mark.parametrize("classes", SUBSETS)
    def test_exact_length_and_guarantee(self, classes, rng):
        for length in (len(classes), 6, 12, 32):
            config = _config(length, classes)
            for _ in range(20):
                pwd = generate(config, rng=rng)
                assert len(pwd) == length
                assert set(pwd) <= set(config.alphabet)
                for c in classes:
                    assert any(ch in c.alphabet for ch in pwd)

    def test_digits_only(self, rng):
        pwd = generate(_config(10, [CharacterClass.DIGIT]), rng=rng)
        assert len(pwd) == 10
        assert pwd.isdigit()

    def test_length_five_all_classes(self, rng):
        for _ in range(50):
            pwd = generate(_config(5, ALL), rng=rng)
            assert len(pwd) == 5
            for c in ALL:
                assert any(ch in c.alphabet for ch in pwd)

    def test_length_below_class_count_truncates(self, rng):
        for _ in range(50):
            pwd = generate(_config(3, ALL), rng=rng)
            assert len(pwd) == 3
            assert set(pwd) <= set(Configuration().alphabet)

    def test_length_one(self, rng):
        assert len(generate(_config(1, ALL), rng=rng)) == 1

    def test_large_length(self, rng):
        assert len(generate(_config(500, ALL), rng=rng)) == 500

    @pytest.mark.parametrize("length", [-5, 0, 1, 12, 64])
    def test_no_class_selected(self, length):
        with pytest.raises(NoClassSelected, match="At least one option"):
            generate(_config(length, []))

    def test_no_class_checked_before_length(self):
        with pytest.raises(NoClassSelected):
            generate(_config(0, []))

    @pytest.mark.parametrize(
        "length", [0, -1, "abc", "", None, True, 12.5, "12.5", "nan", "inf"],
    )
    def test_invalid_length(self, length):
        with pytest.raises(InvalidLength, match="Invalid configuration"):
            generate(_config(length, ALL))

    @pytest.mark.parametrize("length", ["14", " 14 ", "14.0", 14.0])
    def test_numeric_string_length(self, length, rng):
        assert len(generate(_config(length, ALL), rng=rng)) == 14

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            generate(_config(12, []))

    def test_seeded_is_reproducible(self):
        config = _config(16, ALL)
        assert (
            generate(config, rng=random.Random(7))
            == generate(config, rng=random.Random(7))
        )

    def test_uniqueness(self):
        passwords = {generate(_config(16, ALL)) for _ in range(50)}
        assert len(passwords) == 50

    def test_guaranteed_char_position_is_uniform(self, rng):
        """With one slot per class, the uppercase slot lands anywhere."""
        config = _config(4, ALL)
        counts = [0, 0, 0, 0]
        for _ in range(4000):
            pwd = generate(config, rng=rng)
            pos = next(i for i, ch in enumerate(pwd) if ch.isupper())
            counts[pos] += 1
        for n in counts:
            assert 800 < n < 1200


# ── score ──────────────────────────────────────────────────────────────────


class TestScore:
    def test_all_classes_length_12(self):
        s = score(_config(12, ALL))
        assert s.value == 5
        assert s.label is StrengthLabel.STRONG
        assert s.color is ColorTier.EMERALD_LIGHT

    def test_all_classes_length_16(self):
        s = score(_config(16, ALL))
        assert s.value == 6
        assert s.label is StrengthLabel.VERY_STRONG
        assert s.color is ColorTier.EMERALD_DARK
        assert s.percent == 100

    def test_digits_only_length_10(self):
        s = score(_config(10, [CharacterClass.DIGIT]))
        assert s.value == 1
        assert s.label is StrengthLabel.VERY_WEAK
        assert s.color is ColorTier.RED

    def test_zero_shares_lowest_label(self):
        s = score(_config(6, []))
        assert s.value == 0
        assert s.label is StrengthLabel.VERY_WEAK
        assert s.color is ColorTier.RED
        assert s.percent == 0

    def test_labels_by_value(self):
        expected = {
            2: (StrengthLabel.WEAK, ColorTier.RED),
            3: (StrengthLabel.FAIR, ColorTier.ORANGE),
            4: (StrengthLabel.GOOD, ColorTier.YELLOW),
        }
        for n, (label, color) in expected.items():
            s = score(_config(6, ALL[:n]))
            assert s.value == n
            assert s.label is label
            assert s.color is color

    def test_monotonic_in_class_count(self):
        for length in (6, 12, 16, 32):
            values = [score(_config(length, ALL[:n])).value for n in range(5)]
            assert values == sorted(values)

    def test_monotonic_in_length(self):
        for classes in SUBSETS + [[]]:
            values = [score(_config(n, classes)).value for n in (11, 12, 15, 16)]
            assert values == sorted(values)
            assert values[1] == values[0] + 1
            assert values[3] == values[2] + 1

    def test_always_in_range(self):
        for classes in SUBSETS + [[]]:
            for length in (-3, 0, 1, 12, 16, 1000):
                s = score(_config(length, classes))
                assert 0 <= s.value <= 6

    def test_deterministic(self):
        config = _config(14, [CharacterClass.LOWER, CharacterClass.DIGIT])
        assert score(config) == score(config)

    def test_invalid_length(self):
        with pytest.raises(InvalidLength):
            score(_config("twelve", ALL))


# ── estimate_entropy ───────────────────────────────────────────────────────


class TestEstimateEntropy:
    def test_all_classes(self):
        # 84 symbols
        assert estimate_entropy(_config(12, ALL)) == 76.7

    def test_digits(self):
        assert estimate_entropy(_config(10, [CharacterClass.DIGIT])) == 33.2

    def test_no_classes(self):
        assert estimate_entropy(_config(12, [])) == 0.0

    def test_increases_with_length(self):
        assert estimate_entropy(_config(16, ALL)) > estimate_entropy(_config(12, ALL))
