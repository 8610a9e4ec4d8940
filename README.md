# duelo

A small turn-based battle simulator. Two teams of characters fight until one
team has no life left. Each character carries an attack weapon, which decides
how much force a blow has, and a defence weapon, whose resistance is taken off
every blow it receives.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the battle

```
duelo
duelo --seed 42
```

This sets up the built-in line-up (Chaves, Chapolin, Jaspion, Jedi, Monica and
Seiya, split into two teams) and prints every round: who attacks whom, with
which weapon, the damage dealt, the catchphrase of an attacker that did damage,
both fighters' remaining life and the team totals. The team that attacks in
each round is drawn at random; `--seed` fixes the draw so a battle can be
repeated. The battle ends when one team's total life reaches zero.

## Using it from Python

```python
import random

from duelo.armas import Colher, Escudo, Rosa
from duelo.personagens import Chaves, Seiya
from duelo.simulador import Simulador

simulador = Simulador()
simulador.adicionar_personagem(Chaves(1, "Chaves", 100, Rosa("Super Rosa Amarela", 0, 10), Escudo("Latão", 1)), 1)
simulador.adicionar_personagem(Seiya(2, "Seiya", 100, Colher("Colher de Pata", 0, 50), Escudo("Latão", 1)), 2)

simulador.iniciar_simulacao(random.Random(42))
```

Building blocks:

- `duelo.armas` holds the attack weapons and the defence weapons.
  `ArmaAtaque` is abstract; `Rosa` always strikes with its maximum force and
  `Colher` with the width of its force range. `ArmaAtaque.descricao()` gives
  the name followed by the force range. `ArmaDefesa` cannot be instantiated
  itself (it raises `TypeError`); `Escudo`, `Armadura`, `Bloqueio`,
  `Pastilha`, `Pegasus` and `Redemoinho` are its concrete kinds, each with a
  fixed resistance returned by `get_resistencia()`.
- `duelo.personagens` holds `Personagem` and the characters built on it
  (`Chaves`, `Chapolin`, `Jaspion`, `Jedi`, `Monica`, `Seiya`). Each has an
  `id`, a `nome`, its `vida`, and its two weapons; `gerar_ataque()`,
  `criar_defesa()` and `pegar_descricao()` give its blow force, its
  resistance and its catchphrase. `Personagem` itself raises `TypeError`.
- `duelo.simulador.Simulador` keeps teams 1 and 2; any other team number
  raises `ValueError`. `adicionar_personagem` adds a character,
  `remover_personagem` removes the first member with the same `id` and returns
  whether one was found, `calcular_vida_equipe` sums a team's life,
  `proximo_personagem` returns the first member still alive (or `None`),
  `criar_combate` resolves one blow and returns the damage, `criar_saida`
  formats a round's report, `rodadas` yields each round's report, and
  `iniciar_simulacao` runs the whole battle and writes the reports to a text
  stream (standard output by default). Both take an optional `random.Random`.
- `duelo.cli.montar_simulador` returns a simulator holding the built-in
  line-up, and `duelo.cli.main` runs it.

Damage is the attack force minus the defender's resistance, never below zero,
and a character's life never drops below zero.

## What it does not do

The command always stages the built-in line-up; teams and weapons cannot be
chosen from the command line, only by building a `Simulador` in Python.