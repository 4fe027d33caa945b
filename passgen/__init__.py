"""passgen -- configurable random password generation.

Core functions for building a password from toggled character classes and
for scoring how rich a configuration is.
"""

import enum
import logging
import math
import operator
import secrets
from dataclasses import dataclass


logger = logging.getLogger(__name__)


# ── Character classes ──────────────────────────────────────────────────────

UPPER_SET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER_SET = "abcdefghijklmnopqrstuvwxyz"
DIGIT_SET = "0123456789"
SYMBOL_SET = "!@#$%^&*()_+[]{}<>?/|~"


class CharacterClass(enum.Enum):
    """A character category that can be toggled on or off.

    Members are declared in canonical order, which is also the order their
    alphabets are concatenated into the working alphabet.
    """

    UPPER = UPPER_SET
    LOWER = LOWER_SET
    DIGIT = DIGIT_SET
    SYMBOL = SYMBOL_SET

    @property
    def alphabet(self) -> str:
        return self.value


# ── Configuration ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Configuration:
    # Desired password length in characters.
    length: int = 12

    upper: bool = True
    lower: bool = True
    digits: bool = True
    symbols: bool = True

    @classmethod
    def from_classes(cls, length, classes) -> "Configuration":
        enabled = set(classes)
        return cls(
            length=length,
            upper=CharacterClass.UPPER in enabled,
            lower=CharacterClass.LOWER in enabled,
            digits=CharacterClass.DIGIT in enabled,
            symbols=CharacterClass.SYMBOL in enabled,
        )

    @property
    def classes(self) -> list[CharacterClass]:
        """Enabled classes in canonical order."""
        flags = (self.upper, self.lower, self.digits, self.symbols)
        return [c for c, on in zip(CharacterClass, flags) if on]

    @property
    def alphabet(self) -> str:
        """The working alphabet: every enabled class's symbols."""
        return "".join(c.alphabet for c in self.classes)


DEFAULT_CONFIG = Configuration()


# ── Errors ─────────────────────────────────────────────────────────────────


class GenerationError(ValueError):
    """Configuration cannot produce a password."""


class NoClassSelected(GenerationError):
    def __init__(self, message: str = "At least one option must be selected!"):
        super().__init__(message)


class InvalidLength(GenerationError):
    def __init__(self, message: str = "Invalid configuration."):
        super().__init__(message)


def _coerce_length(length) -> int:
    """Read *length* as an integer, accepting numeric strings.

    Strings are read as numbers first, so "12" and "12.0" both give 12.
    """
    if isinstance(length, bool):
        raise InvalidLength()
    if isinstance(length, str):
        try:
            length = float(length.strip())
        except ValueError:
            raise InvalidLength() from None
    if isinstance(length, float):
        if not length.is_integer():
            raise InvalidLength()
        return int(length)
    try:
        return operator.index(length)
    except TypeError:
        raise InvalidLength() from None


# ── Password generation ────────────────────────────────────────────────────

_system_random = secrets.SystemRandom()


def generate(config: Configuration = DEFAULT_CONFIG, rng=None) -> str:
    """Generate a password for *config*.

    One character is drawn from each enabled class, the rest are drawn from
    the working alphabet, and the result is shuffled.  When *length* is
    shorter than the number of enabled classes the shuffled buffer is cut
    down to *length*, so some classes may be missing from the result.

    *rng* is any :class:`random.Random` compatible source; the default is
    :class:`secrets.SystemRandom`.

    Raises :class:`NoClassSelected` when nothing is enabled and
    :class:`InvalidLength` when the length is not a positive integer.
    """
    classes = config.classes
    if not classes:
        raise NoClassSelected()

    length = _coerce_length(config.length)
    if length <= 0:
        raise InvalidLength()

    rng = rng or _system_random
    alphabet = config.alphabet

    chars = [rng.choice(c.alphabet) for c in classes]
    while len(chars) < length:
        chars.append(rng.choice(alphabet))

    # Fisher-Yates
    for i in range(len(chars) - 1, 0, -1):
        j = rng.randrange(i + 1)
        chars[i], chars[j] = chars[j], chars[i]

    if len(chars) > length:
        logger.debug(
            "length %d below class count %d, truncating", length, len(classes),
        )
        del chars[length:]

    logger.debug("generated %d chars from %d classes", length, len(classes))
    return "".join(chars)


# ── Strength scoring ───────────────────────────────────────────────────────

MAX_SCORE = 6


class StrengthLabel(enum.Enum):
    VERY_WEAK = "Very weak"
    WEAK = "Weak"
    FAIR = "Fair"
    GOOD = "Good"
    STRONG = "Strong"
    VERY_STRONG = "Very strong"


class ColorTier(enum.Enum):
    RED = "#ef4444"
    ORANGE = "#f97316"
    YELLOW = "#eab308"
    EMERALD_LIGHT = "#10b981"
    EMERALD_DARK = "#16a34a"


_LABELS = list(StrengthLabel)
_COLORS = list(ColorTier)


@dataclass(frozen=True)
class StrengthScore:
    value: int
    label: StrengthLabel
    color: ColorTier

    @property
    def percent(self) -> float:
        return self.value / MAX_SCORE * 100


def score(config: Configuration = DEFAULT_CONFIG) -> StrengthScore:
    """Score how rich *config* is on a 0-6 scale.

    One point per enabled class, one for length 12+, one more for 16+.
    This rates the configuration, not the entropy of a particular password.
    """
    length = _coerce_length(config.length)

    value = len(config.classes)
    if length >= 12:
        value += 1
    if length >= 16:
        value += 1
    value = max(0, min(value, MAX_SCORE))

    # Scores 0 and 1 share the lowest label.
    label = _LABELS[max(0, value - 1)]
    color = _COLORS[max(0, min(len(_COLORS) - 1, value - 2))]
    return StrengthScore(value=value, label=label, color=color)


def estimate_entropy(config: Configuration = DEFAULT_CONFIG) -> float:
    """Return the theoretical entropy in bits of a password from *config*."""
    alphabet = config.alphabet
    length = _coerce_length(config.length)
    if not alphabet or length <= 0:
        return 0.0
    return round(length * math.log2(len(alphabet)), 1)


__all__ = [
    "CharacterClass",
    "ColorTier",
    "Configuration",
    "DEFAULT_CONFIG",
    "GenerationError",
    "InvalidLength",
    "MAX_SCORE",
    "NoClassSelected",
    "StrengthLabel",
    "StrengthScore",
    "estimate_entropy",
    "generate",
    "score",
]
