"""Interactive main menu of the Enfrendados dice game."""

from __future__ import annotations

import random
from typing import Callable, Dict, Optional, Sequence

from enfrendados.console import Color, Console
from enfrendados.game import PlayerState, play_turn
from enfrendados.stats import Ranking

_BANNER_TOP = (
    "███████╗███╗   ██╗███████╗██████╗ ███████╗███╗   ██╗██████╗  █████╗ ██████╗  ██████╗ ███████╗",
    "██╔════╝████╗  ██║██╔════╝██╔══██╗██╔════╝████╗  ██║██╔══██╗██╔══██╗██╔══██╗██╔═══██╗██╔════╝",
)
_BANNER_MIDDLE = (
    "█████╗  ██╔██╗ ██║█████╗  ██████╔╝█████╗  ██╔██╗ ██║██║  ██║███████║██║  ██║██║   ██║███████╗",
    "██╔══╝  ██║╚██╗██║██╔══╝  ██╔══██╗██╔══╝  ██║╚██╗██║██║  ██║██╔══██║██║  ██║██║   ██║╚════██║",
)
_BANNER_BOTTOM = (
    "███████╗██║ ╚████║██║     ██║  ██║███████╗██║ ╚████║██████╔╝██║  ██║██████╔╝╚██████╔╝███████║",
    "╚══════╝╚═╝  ╚═══╝╚═╝     ╚═╝  ╚═╝╚══════╝╚═╝  ╚═══╝╚═════╝ ╚═╝  ╚═╝╚═════╝  ╚═════╝ ╚══════╝",
)

_MENU_LINES = (
    "===== MENU PRINCIPAL =====",
    "1) JUGAR             ",
    "2) ESTADÍSTICAS      ",
    "3) CRÉDITOS          ",
    "==========================",
    "0) SALIR",
)

_BACK_TO_MENU = "\nPresiona una tecla para volver al menú principal..."
_MENU_X = 35
_MENU_Y = 13


def credits_text() -> str:
    """Return the credits screen."""
    return "===== CREDITOS =====\n* Equipo Enfrendados\n====================\n"


def confirm_exit(read: Callable[[], str], write: Callable[[str], object]) -> bool:
    """Ask until the answer is 's' or 'n' (any case); return True for 's'."""
    while True:
        write("Seguro que deseas salir? (s/n): ")
        answer = read().strip()[:1].lower()
        if answer in ("s", "n"):
            return answer == "s"
        write("Entrada invalida. Por favor ingresa 's' o 'n'.\n")


class _Menu:
    def __init__(self, console: Console) -> None:
        self.console = console
        self.ranking = Ranking()

    def write(self, text: str) -> None:
        self.console.out.write(text)
        self.console.out.flush()

    def read_line(self) -> str:
        line = self.console.inp.readline()
        if not line:
            raise EOFError("no more input")
        return line

    def wait_key(self, message: str = _BACK_TO_MENU) -> None:
        self.console.anykey(message)

    def show_menu(self) -> None:
        console = self.console
        console.cls()
        console.set_background_color(Color.BLACK)
        console.set_color(Color.YELLOW)
        console.locate(0, 0)
        self.write("\n")
        for lines, color in (
            (_BANNER_TOP, Color.YELLOW),
            (_BANNER_MIDDLE, Color.WHITE),
            (_BANNER_BOTTOM, Color.YELLOW),
        ):
            console.set_color(color)
            self.write("".join(line + "\n" for line in lines))
        console.set_color(Color.WHITE)
        self.write(
            "\nBienvenidos a Enfrendados, un juego en el que interviene el azar "
            "y las matematicas. ¡Suerte!"
        )
        console.set_color(Color.YELLOW)
        for offset, line in enumerate(_MENU_LINES):
            console.locate(_MENU_X, _MENU_Y + offset)
            self.write(line + "\n")
        self.write("\n")
        console.locate(0, _MENU_Y + 7)
        self.write("=> Elige tu opción: ")
        console.reset_color()

    def choose_die(self, target: int, available: Dict[int, int], total: int) -> int:
        while True:
            self.write(f"\n Numero objetivo: {target}\n")
            dice = "".join(f"[{index}]:{value} " for index, value in available.items())
            self.write(f"Tus dados: {dice}\n")
            self.write("Elegi un dado (indice): ")
            try:
                index = int(self.read_line().strip())
            except ValueError:
                index = None
            if index in available:
                return index
            self.write("Eleccion invalida. Probar de nuevo.\n")

    def play(self) -> None:
        rng = random.Random()
        player, opponent = PlayerState(), PlayerState()
        play_turn(player, opponent, self.choose_die, rng)
        self.write("\nFin del turno del Jugador 1.\n")
        self.write(f"Stock Jugador 1: {player.dice}\n")
        self.write(f"Stock Jugador 2: {opponent.dice}\n")
        self.write(f"Puntos Jugador 1: {player.points}\n")
        self.ranking.add("Jugador 1", player.points)
        self.wait_key()

    def run(self) -> None:
        while True:
            self.show_menu()
            try:
                option: Optional[int] = int(self.read_line().strip())
            except ValueError:
                option = None
            self.console.cls()
            if option == 1:
                self.play()
            elif option == 2:
                self.write(self.ranking.render())
                self.wait_key()
            elif option == 3:
                self.write(credits_text())
                self.wait_key()
            elif option == 0:
                if confirm_exit(self.read_line, self.write):
                    return
            else:
                self.write("Opcion invalida. Intente otra vez.\n")
                self.wait_key("Presiona una tecla para continuar...")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the main menu until the player confirms exit or input ends."""
    menu = _Menu(Console())
    try:
        menu.run()
    except EOFError:
        pass
    menu.write("Hasta la proxima!\n")
    return 0