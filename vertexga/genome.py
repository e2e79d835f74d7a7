"""Bit-vector genome and the individual that owns it."""

from __future__ import annotations

import random
from typing import Iterable, Iterator, Optional


class Genome:
    """
    Fixed-length bit vector; bit ``i`` set means vertex ``i`` is in the cover.

    Storage is a private ``bytearray``.  :meth:`clone` copies it, so a clone
    never aliases its source.
    """

    __slots__ = ("_bits",)

    def __init__(self, bits: Iterable[int] = ()) -> None:
        self._bits = bytearray(1 if b else 0 for b in bits)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def zeros(cls, length: int) -> "Genome":
        genome = cls()
        genome._bits = bytearray(length)
        return genome

    @classmethod
    def random(cls, length: int, rng: random.Random) -> "Genome":
        """Draw every gene independently and uniformly from {0, 1}."""
        return cls(rng.randrange(2) for _ in range(length))

    @classmethod
    def from_vertices(cls, length: int, vertices: Iterable[int]) -> "Genome":
        genome = cls.zeros(length)
        for v in vertices:
            genome.set(v, 1)
        return genome

    # ------------------------------------------------------------------
    # Bit access
    # ------------------------------------------------------------------

    def get(self, i: int) -> int:
        return self._bits[i]

    def set(self, i: int, bit: int) -> None:
        self._bits[i] = 1 if bit else 0

    def count_ones(self) -> int:
        return self._bits.count(1)

    def clone(self) -> "Genome":
        genome = Genome()
        genome._bits = bytearray(self._bits)
        return genome

    def vertices(self) -> list[int]:
        """Indices of the set bits, ascending."""
        return [i for i, b in enumerate(self._bits) if b]

    def to_list(self) -> list[int]:
        return list(self._bits)

    def sort_key(self) -> bytes:
        return bytes(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __getitem__(self, i: int) -> int:
        return self._bits[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Genome):
            return NotImplemented
        return self._bits == other._bits

    def __repr__(self) -> str:
        return f"Genome({''.join(str(b) for b in self._bits)})"


class Individual:
    """
    A genome plus its cached ``fitness`` and ``cover_size``.

    Offspring start unevaluated; ``evaluated`` stays False until the
    evolution loop scores them, and unevaluated individuals cannot be
    ranked.
    """

    __slots__ = ("genome", "fitness", "cover_size")

    def __init__(self, genome: Genome) -> None:
        self.genome = genome
        self.fitness: Optional[float] = None
        self.cover_size: Optional[int] = None

    @property
    def evaluated(self) -> bool:
        return self.fitness is not None

    def copy(self) -> "Individual":
        """Deep copy, cached fields included."""
        ind = Individual(self.genome.clone())
        ind.fitness = self.fitness
        ind.cover_size = self.cover_size
        return ind

    def __repr__(self) -> str:
        if not self.evaluated:
            return f"<Individual {self.genome!r} unevaluated>"
        return f"<Individual size={self.cover_size} fitness={self.fitness:g}>"
