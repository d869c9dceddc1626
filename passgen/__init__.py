"""passgen -- random password generation and strength rating.

Core functions for building a character pool from enabled character
classes, drawing a password from it, and rating a password by length.
"""

import enum
import logging
import secrets
import string
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

MAX_LENGTH = 16


# ── Errors ─────────────────────────────────────────────────────────────────


class InvalidInput(ValueError):
    """Base class for requests the generator cannot satisfy."""


class EmptyPool(InvalidInput):
    """No character class is enabled, so there is nothing to draw from."""


class InvalidLength(InvalidInput):
    """Length is negative, out of bounds, or not an integer."""


def _check_length(length: object) -> int:
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLength(f"Length must be an integer, got {length!r}")
    if length < 0:
        raise InvalidLength(f"Length must not be negative, got {length}")
    return length


# ── Character classes ──────────────────────────────────────────────────────


class CharacterClass(enum.Enum):
    """A named alphabet that can be switched on or off.

    Declaration order is the order alphabets are concatenated into a pool.
    """

    UPPERCASE = string.ascii_uppercase
    LOWERCASE = string.ascii_lowercase
    NUMBERS = string.digits
    SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

    @property
    def alphabet(self) -> str:
        return self.value


def _check_classes(classes: Iterable[object]) -> frozenset[CharacterClass]:
    enabled = frozenset(classes)
    for cls in enabled:
        if not isinstance(cls, CharacterClass):
            raise TypeError(f"Not a character class: {cls!r}")
    return enabled


def build_character_pool(classes: Iterable[CharacterClass]) -> str:
    """Concatenate the alphabets of *classes* in canonical order.

    The order in which *classes* is given does not matter, and duplicates
    are ignored.  No classes yields an empty pool, which is not an error
    here; :func:`generate` refuses to draw from it.
    """
    enabled = _check_classes(classes)
    pool = "".join(cls.alphabet for cls in CharacterClass if cls in enabled)
    logger.debug(
        "Built pool of %d characters from %d class(es)", len(pool), len(enabled),
    )
    return pool


# ── Strength rating ────────────────────────────────────────────────────────


class StrengthRating(enum.IntEnum):
    NONE = 0
    TOO_WEAK = 1
    WEAK = 2
    MEDIUM = 3
    STRONG = 4

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    StrengthRating.NONE: "",
    StrengthRating.TOO_WEAK: "Too weak!",
    StrengthRating.WEAK: "Weak",
    StrengthRating.MEDIUM: "Medium",
    StrengthRating.STRONG: "Strong",
}


@dataclass(frozen=True)
class StrengthBuckets:
    """Inclusive upper length bound of each rating above NONE."""

    too_weak: int = 4
    weak: int = 8
    medium: int = 12
    strong: int = 16

    def __post_init__(self) -> None:
        bounds = [self.too_weak, self.weak, self.medium, self.strong]
        if bounds[0] < 1 or any(a >= b for a, b in zip(bounds, bounds[1:])):
            raise ValueError(
                f"Bucket bounds must be positive and strictly increasing: {bounds}"
            )

    def rating_for(self, length: int) -> StrengthRating:
        length = _check_length(length)
        if length == 0:
            return StrengthRating.NONE
        if length <= self.too_weak:
            return StrengthRating.TOO_WEAK
        if length <= self.weak:
            return StrengthRating.WEAK
        if length <= self.medium:
            return StrengthRating.MEDIUM
        if length <= self.strong:
            return StrengthRating.STRONG
        # Past the last bucket; the caller decides how to render it
        return StrengthRating.NONE


DEFAULT_BUCKETS = StrengthBuckets()


def classify_strength(
    length: int, buckets: StrengthBuckets = DEFAULT_BUCKETS,
) -> StrengthRating:
    """Rate a password by its *length* alone.

    Character diversity is deliberately not considered.  Lengths beyond
    the last bucket rate as NONE.
    """
    return buckets.rating_for(length)


# ── Password generation ────────────────────────────────────────────────────


@dataclass(frozen=True)
class GeneratedPassword:
    characters: str

    def __str__(self) -> str:
        return self.characters

    def __len__(self) -> int:
        return len(self.characters)

    @property
    def strength(self) -> StrengthRating:
        return classify_strength(len(self.characters))


def generate(
    length: int,
    pool: str,
    *,
    randbelow: Callable[[int], int] = secrets.randbelow,
) -> GeneratedPassword:
    """Draw *length* characters uniformly and independently from *pool*.

    *randbelow* is the random source and must be cryptographically secure
    outside of tests.  :func:`secrets.randbelow` rejection-samples, so
    indices carry no modulo bias.

    Raises :class:`InvalidLength` when *length* is below 1 and
    :class:`EmptyPool` when *pool* is empty.
    """
    if _check_length(length) < 1:
        raise InvalidLength("Length must be at least 1")
    if not pool:
        raise EmptyPool("Select at least one character class")

    size = len(pool)
    chars = [pool[randbelow(size)] for _ in range(length)]
    logger.debug("Generated %d characters from a pool of %d", length, size)
    return GeneratedPassword("".join(chars))


@dataclass(frozen=True)
class GenerationRequest:
    """One user action: how long, and which classes to draw from."""

    length: int
    classes: frozenset[CharacterClass] = field(default_factory=frozenset)
    max_length: int = MAX_LENGTH

    def __post_init__(self) -> None:
        _check_length(self.length)
        if self.length > self.max_length:
            raise InvalidLength(
                f"Length must be at most {self.max_length}, got {self.length}"
            )
        object.__setattr__(self, "classes", _check_classes(self.classes))

    @property
    def pool(self) -> str:
        return build_character_pool(self.classes)


def generate_password(
    request: GenerationRequest,
    *,
    randbelow: Callable[[int], int] = secrets.randbelow,
) -> GeneratedPassword:
    """Generate a password satisfying *request*.

    The caller keeps the result as its current password; nothing is
    retained here.
    """
    return generate(request.length, request.pool, randbelow=randbelow)
