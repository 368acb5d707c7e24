import io
import random
import sys

import pytest

from enfrendados.cli import confirm_exit, credits_text, main


class _Scripted:
    def __init__(self, values):
        self._values = iter(values)

    def randint(self, a, b):
        return next(self._values)


def _reader(lines):
    it = iter(lines)

    def read():
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main()
    return code, capsys.readouterr().out


def test_credits_text_frame():
    text = credits_text()
    assert text.startswith("===== CREDITOS =====\n")
    assert text.endswith("====================\n")


@pytest.mark.parametrize("answer", ["s\n", "S\n", " s\n"])
def test_confirm_exit_yes(answer):
    written = []
    assert confirm_exit(_reader([answer]), written.append) is True
    assert written == ["Seguro que deseas salir? (s/n): "]


def test_confirm_exit_no():
    assert confirm_exit(_reader(["N\n"]), lambda text: None) is False


def test_confirm_exit_reprompts_on_invalid():
    written = []
    assert confirm_exit(_reader(["x\n", "\n", "s\n"]), written.append) is True
    assert written.count("Entrada invalida. Por favor ingresa 's' o 'n'.\n") == 2


def test_confirm_exit_propagates_eof():
    with pytest.raises(EOFError):
        confirm_exit(_reader([]), lambda text: None)


def test_main_exits_after_confirmation(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "0\ns\n")
    assert code == 0
    assert out.endswith("Hasta la proxima!\n")
    assert "===== MENU PRINCIPAL =====" in out


def test_main_declined_exit_shows_menu_again(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "0\nn\n0\ns\n")
    assert out.count("===== MENU PRINCIPAL =====") == 2
    assert code == 0


def test_main_empty_statistics(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "2\n\n0\ns\n")
    assert "No hay estadisticas disponibles." in out


def test_main_credits(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "3\n\n0\ns\n")
    assert credits_text() in out


def test_main_invalid_option(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "9\n\n0\ns\n")
    assert "Opcion invalida. Intente otra vez." in out


def test_main_ends_on_eof(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "")
    assert code == 0
    assert out.endswith("Hasta la proxima!\n")


def test_main_game_records_ranking(monkeypatch, capsys):
    monkeypatch.setattr(
        random, "Random", lambda *args: _Scripted([6, 6, 6, 6, 6, 6, 6, 6])
    )
    _, out = _run(monkeypatch, capsys, "1\n7\n0\n1\n\n2\n\n0\ns\n")
    assert "Eleccion invalida. Probar de nuevo." in out
    assert "Fin del turno del Jugador 1." in out
    assert "No hay estadisticas disponibles." not in out
    ranking_part = out.split("===== TOP 4 JUGADORES =====", 1)[1]
    assert " 1. Jugador 1" in ranking_part