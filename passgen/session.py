"""Generator state held by a user interface between interactions.

A session owns the toggles and length control, the last generated password
or validation message, and the short-lived "copied" acknowledgment.
"""

import logging
import time
from typing import Callable

from passgen import (
    DEFAULT_CONFIG,
    Configuration,
    GenerationError,
    StrengthScore,
    estimate_entropy,
    generate,
    score,
)

logger = logging.getLogger(__name__)

# How long the "copied" acknowledgment stays visible, in seconds.
COPY_ACK_SECONDS = 1.5

NO_CLASS_HINT = "At least one option must be selected."


class GeneratorSession:
    """Mutable generator state for one user.

    Args:
        rng: random source passed through to :func:`passgen.generate`
        clock: monotonic time source used for the copy acknowledgment
    """

    def __init__(
        self,
        config: Configuration = DEFAULT_CONFIG,
        *,
        rng=None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.length = config.length
        self.upper = config.upper
        self.lower = config.lower
        self.digits = config.digits
        self.symbols = config.symbols

        self.password = ""
        self.error = ""

        self._rng = rng
        self._clock = clock
        self._copied_at: float | None = None

    @property
    def config(self) -> Configuration:
        return Configuration(
            length=self.length,
            upper=self.upper,
            lower=self.lower,
            digits=self.digits,
            symbols=self.symbols,
        )

    @property
    def no_class_selected(self) -> bool:
        return not (self.upper or self.lower or self.digits or self.symbols)

    @property
    def strength(self) -> StrengthScore:
        return score(self.config)

    @property
    def entropy(self) -> float:
        return estimate_entropy(self.config)

    def generate(self) -> str | None:
        """Generate a new password, or record why it could not be made."""
        try:
            password = generate(self.config, rng=self._rng)
        except GenerationError as exc:
            logger.info("generation rejected: %s", exc)
            self.password = ""
            self.error = str(exc)
            self._copied_at = None
            return None

        self.password = password
        self.error = ""
        self._copied_at = None
        return password

    # ── Clipboard ──

    @property
    def can_copy(self) -> bool:
        return bool(self.password) and not self.error

    @property
    def copied(self) -> bool:
        """True while the copy acknowledgment should be shown."""
        if self._copied_at is None:
            return False
        if self._clock() - self._copied_at >= COPY_ACK_SECONDS:
            self._copied_at = None
            return False
        return True

    def copy(self, write: Callable[[str], object]) -> bool:
        """Hand the current password to *write* if copying is allowed.

        Returns False without calling *write* when there is no password or
        a validation error is active.
        """
        if not self.can_copy:
            return False
        write(self.password)
        self._copied_at = self._clock()
        logger.debug("password copied to clipboard")
        return True
