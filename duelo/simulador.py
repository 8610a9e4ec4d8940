"""Team battle simulator."""

from __future__ import annotations

import random
import sys
from collections.abc import Iterator
from typing import TextIO

from duelo.personagens import Personagem

_SEPARADOR = "-" * 57


class Simulador:
    """Two teams of characters that fight until one team has no life left."""

    def __init__(self) -> None:
        self._equipes: dict[int, list[Personagem]] = {1: [], 2: []}

    def _equipe(self, equipe: int) -> list[Personagem]:
        try:
            return self._equipes[equipe]
        except KeyError:
            raise ValueError(f"invalid team: {equipe!r}") from None

    def adicionar_personagem(self, personagem: Personagem, equipe: int) -> None:
        """Add a character to team 1 or 2."""
        self._equipe(equipe).append(personagem)

    def remover_personagem(self, personagem: Personagem, equipe: int) -> bool:
        """Remove the first member with the character's id; report whether one was found."""
        membros = self._equipe(equipe)
        for posicao, membro in enumerate(membros):
            if membro.id == personagem.id:
                del membros[posicao]
                return True
        return False

    def calcular_vida_equipe(self, equipe: int) -> int:
        """Total life of a team."""
        return sum(p.vida for p in self._equipe(equipe))

    def proximo_personagem(self, equipe: int) -> Personagem | None:
        """First member of the team still alive, or None."""
        return next((p for p in self._equipe(equipe) if p.vida > 0), None)

    def criar_combate(self, atacante: Personagem, defensor: Personagem) -> int:
        """Resolve one blow and return the damage dealt."""
        dano = max(0, atacante.gerar_ataque() - defensor.criar_defesa())
        defensor.vida = max(0, defensor.vida - dano)
        return dano

    def criar_saida(self, atacante: Personagem, defensor: Personagem, dano: int) -> str:
        """Report of one blow."""
        partes = [
            f"{_SEPARADOR}\n",
            f"O personagem {atacante.nome} irá atacar o {defensor.nome}\n",
            f"com a sua arma {atacante.arma_ataque.descricao()}\n",
            f"Dano causado = {dano}\n",
        ]
        if dano > 0:
            partes.append(f"{atacante.nome}: {atacante.pegar_descricao()}")
        partes.append(
            f"\nVIDA:\n{atacante.nome} [{atacante.vida}] {defensor.nome} [{defensor.vida}]"
        )
        partes.append(
            f"\nEquipe 1 {self.calcular_vida_equipe(1)} x "
            f"{self.calcular_vida_equipe(2)} Equipe 2"
        )
        partes.append(f"\n{_SEPARADOR}\n")
        return "".join(partes)

    def rodadas(self, rng: random.Random | None = None) -> Iterator[str]:
        """Fight round after round, yielding each round's report."""
        rng = rng or random.Random()
        while self.calcular_vida_equipe(1) > 0 and self.calcular_vida_equipe(2) > 0:
            atacante_eq, defensor_eq = (1, 2) if rng.randrange(2) == 0 else (2, 1)
            atacante = self.proximo_personagem(atacante_eq)
            defensor = self.proximo_personagem(defensor_eq)
            dano = self.criar_combate(atacante, defensor)
            yield self.criar_saida(atacante, defensor, dano)

    def iniciar_simulacao(
        self, rng: random.Random | None = None, saida: TextIO | None = None
    ) -> None:
        """Run the whole fight, writing every round's report."""
        saida = saida or sys.stdout
        for texto in self.rodadas(rng):
            print(texto, file=saida)