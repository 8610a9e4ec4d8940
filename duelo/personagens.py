"""Characters that take part in a fight."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from duelo.armas import ArmaAtaque, ArmaDefesa


@dataclass(eq=False)
class Personagem:
    """A fighter with life points and a pair of weapons."""

    BORDAO: ClassVar[str] = ""

    id: int
    nome: str
    vida: int
    arma_ataque: ArmaAtaque
    arma_defesa: ArmaDefesa

    def __post_init__(self) -> None:
        if not type(self).BORDAO:
            raise TypeError("Personagem is abstract; use a concrete character")

    def gerar_ataque(self) -> int:
        """Force of this character's next blow."""
        return self.arma_ataque.gerar_forca_ataque()

    def criar_defesa(self) -> int:
        """Damage this character absorbs from a blow."""
        return self.arma_defesa.get_resistencia()

    def pegar_descricao(self) -> str:
        """The character's catchphrase."""
        return type(self).BORDAO


class Chaves(Personagem):
    BORDAO = "Eii, não contava com a minha astucia?"


class Chapolin(Personagem):
    BORDAO = "Todos os meus movimentos são friamente calculados!"


class Jaspion(Personagem):
    BORDAO = "Ao infinito e além!"


class Jedi(Personagem):
    BORDAO = "Que a forca esteja com voce"


class Monica(Personagem):
    BORDAO = "Voce me pagaaaaa!"


class Seiya(Personagem):
    BORDAO = "Pela justica e a paz!"