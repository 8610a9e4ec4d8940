"""Attack and defence weapons used by the characters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ArmaAtaque(ABC):
    """An attack weapon with a force range."""

    nome: str
    min_forca: int
    max_forca: int

    def descricao(self) -> str:
        """Name of the weapon followed by its force range."""
        return f"{self.nome}\t[{self.min_forca},{self.max_forca}]"

    @abstractmethod
    def gerar_forca_ataque(self) -> int:
        """Force of one blow."""

    @abstractmethod
    def gerar_ruido_ataque(self) -> str:
        """Sound the weapon makes when it strikes."""


@dataclass
class ArmaDefesa:
    """A defence weapon with a fixed resistance."""

    nome: str
    resistencia: int

    def __post_init__(self) -> None:
        if type(self) is ArmaDefesa:
            raise TypeError("ArmaDefesa is abstract; use a concrete defence weapon")

    def descricao(self) -> str:
        """Name of the weapon."""
        return self.nome

    def get_resistencia(self) -> int:
        """Damage the weapon absorbs from each blow."""
        return self.resistencia


class Rosa(ArmaAtaque):
    """Always strikes with its maximum force."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca

    def gerar_ruido_ataque(self) -> str:
        return "plin plin"


class Colher(ArmaAtaque):
    """Strikes with the width of its force range."""

    def gerar_forca_ataque(self) -> int:
        return self.max_forca - self.min_forca

    def gerar_ruido_ataque(self) -> str:
        return "cush cush"


class Escudo(ArmaDefesa):
    """A shield."""


class Armadura(ArmaDefesa):
    """A suit of armour."""


class Bloqueio(ArmaDefesa):
    """A parry."""


class Pastilha(ArmaDefesa):
    """Shrinking pills."""


class Pegasus(ArmaDefesa):
    """The Pegasus cloth."""


class Redemoinho(ArmaDefesa):
    """A protective whirlwind."""