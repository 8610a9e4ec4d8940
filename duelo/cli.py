"""Command line entry point that stages the default battle."""

from __future__ import annotations

import argparse
import random

from duelo.armas import (
    Armadura,
    Bloqueio,
    Colher,
    Escudo,
    Pastilha,
    Pegasus,
    Redemoinho,
    Rosa,
)
from duelo.personagens import Chapolin, Chaves, Jaspion, Jedi, Monica, Seiya
from duelo.simulador import Simulador


def montar_simulador() -> Simulador:
    """Build the simulator with the default teams."""
    rosa = Rosa("Super Rosa Amarela", 0, 10)
    colher = Colher("Colher de Pata", 0, 50)

    escudo = Escudo("Latão", 1)
    pastilha = Pastilha("Pastilhas Encolhedoras", 0)
    armadura = Armadura("Armadura de Ferro", 0)
    bloqueio = Bloqueio("Bloqueio de Jedi", 0)
    redemoinho = Redemoinho("Redemoinho Protetor", 0)
    pegasus = Pegasus("Armadura de Pegasus", 1)

    simulador = Simulador()
    equipes = [
        (Chaves(1, "Chaves Eq1", 100, rosa, escudo), 1),
        (Chaves(2, "Chaves Eq2", 40, rosa, escudo), 2),
        (Chaves(1, "Chaves Eq1 - Reserva", 100, rosa, escudo), 1),
        (Chaves(2, "Chaves Eq2 - Reserva", 100, rosa, escudo), 2),
        (Chapolin(3, "Chapolin Colorado", 100, colher, pastilha), 1),
        (Jaspion(4, "Jaspion", 100, colher, armadura), 2),
        (Jedi(5, "Jedi", 100, colher, bloqueio), 1),
        (Monica(6, "Monica", 100, colher, redemoinho), 2),
        (Seiya(7, "Saint-Seiya", 100, colher, pegasus), 1),
    ]
    for personagem, equipe in equipes:
        simulador.adicionar_personagem(personagem, equipe)
    return simulador


def main(argv: list[str] | None = None) -> int:
    """Run the default battle and print every round."""
    parser = argparse.ArgumentParser(prog="duelo", description="Team battle simulator.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random choice of attacker")
    args = parser.parse_args(argv)
    montar_simulador().iniciar_simulacao(random.Random(args.seed))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())