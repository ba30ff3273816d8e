"""Fixed word list from which secret words are drawn at random."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator

WORD_LEN = 5

DEFAULT_WORDS: tuple[str, ...] = (
    "Arbol", "Boton", "CDyMC", "ClavE", "Facil",
    "Gafas", "Hojas", "LiBro", "Lanza", "Nieve",
    "PeRro", "PecES", "PiAno", "PrYKe", "RUEDa",
    "SERIE", "SalUd", "Salud", "Silla", "Tecla",
    "Valor", "Verde", "YnHRz", "hARdD", "silla",
)

# The seed is truncated to the width of an unsigned int on the target.
_SEED_MASK = 0xFFFF
# An unseeded generator behaves as if seeded with 1.
_DEFAULT_SEED = 1


class Dictionary:
    """A collection of fixed-length words with a seedable random picker."""

    def __init__(self, words: Iterable[str] | None = None) -> None:
        chosen = tuple(DEFAULT_WORDS if words is None else words)
        if not chosen:
            raise ValueError("dictionary must hold at least one word")
        for word in chosen:
            if len(word) != WORD_LEN:
                raise ValueError(
                    f"word {word!r} must be exactly {WORD_LEN} characters long"
                )
        self._words = chosen
        self._rng = random.Random(_DEFAULT_SEED)

    @property
    def words(self) -> tuple[str, ...]:
        """The words in their stored order."""
        return self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def seed(self, value: int) -> None:
        """Reseed the picker, typically from the current millisecond clock."""
        self._rng.seed(int(value) & _SEED_MASK)

    def random_word(self) -> str:
        """Return one word chosen at random."""
        return self._words[self._rng.randrange(len(self._words))]