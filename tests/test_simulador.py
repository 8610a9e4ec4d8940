import io
import random

import pytest

from duelo.armas import Colher, Escudo, Rosa
from duelo.personagens import Chapolin, Chaves
from duelo.simulador import Simulador


def _chaves(id_, nome, vida, forca=10, resistencia=1):
    return Chaves(id_, nome, vida, Rosa("Super Rosa Amarela", 0, forca), Escudo("Latão", resistencia))


@pytest.fixture
def simulador():
    sim = Simulador()
    sim.adicionar_personagem(_chaves(1, "A", 100), 1)
    sim.adicionar_personagem(_chaves(1, "A2", 100), 1)
    sim.adicionar_personagem(_chaves(2, "B", 40), 2)
    sim.adicionar_personagem(_chaves(2, "B2", 100), 2)
    return sim


def test_invalid_team_raises():
    sim = Simulador()
    with pytest.raises(ValueError):
        sim.adicionar_personagem(_chaves(1, "A", 10), 3)
    with pytest.raises(ValueError):
        sim.calcular_vida_equipe(0)


def test_team_life_is_sum():
    sim = Simulador()
    a, b = _chaves(1, "A", 30), _chaves(2, "B", 12)
    sim.adicionar_personagem(a, 1)
    sim.adicionar_personagem(b, 1)
    assert sim.calcular_vida_equipe(1) == a.vida + b.vida
    assert sim.calcular_vida_equipe(2) == 0


def test_remove_existing_and_missing():
    sim = Simulador()
    a = _chaves(1, "A", 30)
    sim.adicionar_personagem(a, 1)
    assert sim.remover_personagem(a, 1) is True
    assert sim.calcular_vida_equipe(1) == 0
    assert sim.remover_personagem(a, 1) is False


def test_next_character_skips_dead():
    sim = Simulador()
    morto, vivo = _chaves(1, "A", 0), _chaves(2, "B", 5)
    sim.adicionar_personagem(morto, 1)
    sim.adicionar_personagem(vivo, 1)
    assert sim.proximo_personagem(1) is vivo
    assert sim.proximo_personagem(2) is None


def test_combat_reduces_life_by_damage():
    sim = Simulador()
    atacante, defensor = _chaves(1, "A", 100), _chaves(2, "B", 100)
    dano = sim.criar_combate(atacante, defensor)
    assert dano == atacante.gerar_ataque() - defensor.criar_defesa()
    assert defensor.vida == 100 - dano


def test_combat_damage_never_negative():
    sim = Simulador()
    atacante = _chaves(1, "A", 100, forca=1)
    defensor = _chaves(2, "B", 100, resistencia=5)
    assert sim.criar_combate(atacante, defensor) == 0
    assert defensor.vida == 100


def test_combat_life_never_negative():
    sim = Simulador()
    atacante = _chaves(1, "A", 100, forca=50)
    defensor = _chaves(2, "B", 3)
    sim.criar_combate(atacante, defensor)
    assert defensor.vida == 0


def test_output_with_damage(simulador):
    atacante = simulador.proximo_personagem(1)
    defensor = simulador.proximo_personagem(2)
    texto = simulador.criar_saida(atacante, defensor, 9)
    linhas = texto.rstrip("\n").splitlines()
    assert set(linhas[0]) == {"-"}
    assert linhas[-1] == linhas[0]
    assert "O personagem A irá atacar o B\n" in texto
    assert "com a sua arma Super Rosa Amarela\t[0,10]\n" in texto
    assert "Dano causado = 9\n" in texto
    assert f"A: {atacante.pegar_descricao()}\nVIDA:\n" in texto
    assert f"A [{atacante.vida}] B [{defensor.vida}]" in texto
    assert (
        f"Equipe 1 {simulador.calcular_vida_equipe(1)} x "
        f"{simulador.calcular_vida_equipe(2)} Equipe 2" in texto
    )


def test_output_without_damage_has_no_catchphrase(simulador):
    atacante = simulador.proximo_personagem(1)
    defensor = simulador.proximo_personagem(2)
    texto = simulador.criar_saida(atacante, defensor, 0)
    assert atacante.pegar_descricao() not in texto
    assert "Dano causado = 0\n\nVIDA:\n" in texto


def test_rounds_end_with_one_team_dead(simulador):
    relatorios = list(simulador.rodadas(random.Random(7)))
    assert relatorios
    vidas = (simulador.calcular_vida_equipe(1), simulador.calcular_vida_equipe(2))
    assert min(vidas) == 0
    assert max(vidas) > 0


def test_rounds_are_reproducible_with_seed():
    def montar():
        sim = Simulador()
        sim.adicionar_personagem(_chaves(1, "A", 100), 1)
        sim.adicionar_personagem(
            Chapolin(3, "C", 100, Colher("Colher de Pata", 0, 50), Escudo("Latão", 0)), 1
        )
        sim.adicionar_personagem(_chaves(2, "B", 100), 2)
        return sim

    sim_a, sim_b = montar(), montar()
    relatorios_a = list(sim_a.rodadas(random.Random(3)))
    relatorios_b = list(sim_b.rodadas(random.Random(3)))

    assert len(relatorios_a) > 0
    assert len(relatorios_a) == len(relatorios_b)
    assert relatorios_a == relatorios_b

    vidas_a = (sim_a.calcular_vida_equipe(1), sim_a.calcular_vida_equipe(2))
    vidas_b = (sim_b.calcular_vida_equipe(1), sim_b.calcular_vida_equipe(2))
    assert vidas_a == vidas_b
    assert min(vidas_a) == 0


def test_simulation_writes_reports(simulador):
    saida = io.StringIO()
    simulador.iniciar_simulacao(random.Random(11), saida)
    texto = saida.getvalue()
    assert texto.count("O personagem ") == texto.count("Dano causado = ")
    assert texto.count("O personagem ") > 0
    assert min(simulador.calcular_vida_equipe(1), simulador.calcular_vida_equipe(2)) == 0