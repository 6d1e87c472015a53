"""Interactive menus for registering players and betting on cups."""

from __future__ import annotations

import argparse
import subprocess
import sys
from typing import Callable, TextIO

from .game import (
    DuplicateAliasError,
    GameError,
    InactiveUserError,
    Registry,
    RegistryFullError,
    Table,
    UnknownAliasError,
)
from .models import PersonalData, User, ValidationError, clip_text, parse_ci, parse_date


def format_user(user: User) -> str:
    data = user.data
    return (
        f"\nCI: {data.ci}"
        f"\nNombre: {data.name}"
        f"\nApellido: {data.surname}"
        f"\nAlias: {data.alias}"
    )


def format_cups(mark: str, cup: int) -> str:
    cups = ["O", "O", "O"]
    cups[cup - 1] = mark
    return " ".join(cups) + "\n\n"


def format_bets(user: User) -> str:
    lines = ["ACERTO       MONTO APOSTADO    SALDO RESULTANTE\n"]
    for bet in user.bets:
        lines.append(
            ("   SI    " if bet.won else "   NO    ")
            + f"      {bet.amount}     "
            + f"            {bet.resulting_balance}     "
            + "\n"
        )
    return "".join(lines)


def _clear_screen() -> None:
    try:
        subprocess.run(["clear"], check=False)
    except OSError:
        pass


class Console:
    """Drives the menus over a pair of text streams."""

    def __init__(
        self,
        registry: Registry | None = None,
        table: Table | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        clear: Callable[[], None] | None = None,
    ):
        self.registry = registry if registry is not None else Registry()
        self.table = table if table is not None else Table()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.clear = clear if clear is not None else _clear_screen

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def _read_line(self) -> str:
        line = self.stdin.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\n")

    def _read_int(self) -> int | None:
        try:
            return int(self._read_line().strip())
        except ValueError:
            return None

    def _pause(self, message: str = "\nPresione enter para continuar") -> None:
        self._write(message)
        self._read_line()

    def _confirm(self) -> bool:
        line = ""
        while not line:
            line = self._read_line()
        return line[0] in "sS"

    def _choose(self, options: list[str], clear_after: bool) -> int:
        while True:
            for number, option in enumerate(options, 1):
                self._write(f"{number}- {option}\n")
            self._write("Seleccione una opcion: ")
            op = self._read_int()
            valid = op is not None and 1 <= op <= len(options)
            if not valid:
                self._write("\nOpcion no existe, vuelva a intentarlo\n")
                self._read_line()
                self.clear()
            if clear_after:
                self.clear()
            if valid:
                return op

    def _read_ci(self):
        while True:
            try:
                return parse_ci(self._read_line())
            except ValidationError:
                self._write("Cedula no valida, vuelva a ingresarla de manera correcta\n")

    def _read_date(self):
        while True:
            try:
                return parse_date(self._read_line())
            except ValidationError:
                self._write("Fecha incorrecta, vuelva a ingresarla\n")

    def _read_details(self):
        self._write("Ingrese Ci: ")
        ci = self._read_ci()
        self._write("Ingrese fecha de nacimiento (dd/mm/aaaa): ")
        birth_date = self._read_date()
        self._write("Ingrese Nombre: ")
        name = clip_text(self._read_line())
        self._write("Ingrese Apellido: ")
        surname = clip_text(self._read_line())
        return ci, birth_date, name, surname

    def run(self) -> None:
        self._write("**********Bienvenido!**********\n")
        actions = {1: self.manage_users, 2: self.queries, 3: self.bet}
        try:
            while (op := self.main_menu()) != 4:
                actions[op]()
        except EOFError:
            pass
        self.clear()
        self._write("Gracias por jugar! :)")

    def main_menu(self) -> int:
        return self._choose(
            ["Gestionar Usuarios", "Consultas", "Apostar", "Salir"], clear_after=False
        )

    def manage_users(self) -> None:
        self.clear()
        self._write("Bienvenido a Gestion de Usuarios\n")
        op = self._choose(
            ["Alta de Jugador", "Baja de Jugador", "Modificacion de Jugador", "Volver al menu"],
            clear_after=True,
        )
        if op == 1:
            self.register()
        elif op == 3:
            self.modify()

    def register(self) -> None:
        self._write("Ingrese el alias: ")
        alias = clip_text(self._read_line())
        if any(user.alias == alias for user in self.registry):
            self._write("Ya existe un usuario con ese Alias\n")
        else:
            ci, birth_date, name, surname = self._read_details()
            self._write("Confirmar Datos? (s/n): ")
            if self._confirm():
                try:
                    user = self.registry.add(PersonalData(ci, birth_date, name, surname, alias))
                except DuplicateAliasError:
                    self._write("Ya existe un usuario con ese Alias\n")
                except RegistryFullError:
                    self._write("No hay lugar para mas usuarios\n")
                else:
                    self._write("El usuario se ha creado correctamente\n")
                    self._write(format_user(user))
                    self._write(f"\nFecha de Nacimiento: {user.data.birth_date}")
            else:
                self._write("El usuario no ha sido creado\n")
        self._pause()
        self.clear()

    def modify(self) -> None:
        self._write("Ingrese alias del usuario que desea modificar: ")
        alias = clip_text(self._read_line())
        try:
            self.registry.find(alias)
        except UnknownAliasError:
            self._write("No existe un usuario con ese Alias\n")
        else:
            ci, birth_date, name, surname = self._read_details()
            self._write("Confirmar cambios? (s/n): ")
            if self._confirm():
                user = self.registry.modify(alias, ci, birth_date, name, surname)
                self._write(format_user(user))
                self._write(f"\nFecha de Nacimiento: {user.data.birth_date}")
                self._write("\nEl usuario se modifico correctamente\n")
            else:
                self._write("\nEl usuario no se ha modificado\n")
        self._pause()
        self.clear()

    def queries(self) -> None:
        self.clear()
        self._write("Bienvenido a Consultas\n")
        op = self._choose(
            [
                "Listado de Jugadores",
                "Listado de todas las Apuestas",
                "Listado de Apuestas por Jugador",
                "Volver al menu",
            ],
            clear_after=True,
        )
        if op == 1:
            self.list_players()
        elif op == 3:
            self.list_bets()

    def list_players(self) -> None:
        for user in self.registry.active_by_alias():
            self._write(format_user(user))
            self._write(f"\nSaldo Actual: {user.balance}\n")
        self._pause()
        self.clear()

    def list_bets(self) -> None:
        self._write("Ingrese alias: ")
        alias = clip_text(self._read_line())
        try:
            user = self.registry.find(alias)
        except UnknownAliasError:
            self._write("El alias que ingreso no existe\n")
        else:
            self._write(f"\nAlias: {user.alias}\nSaldo: {user.balance}\n")
            self._write(format_bets(user))
        self._pause("Presione enter para volver al menu\n")
        self.clear()

    def bet(self) -> None:
        self._write("Ingrese su alias: ")
        alias = clip_text(self._read_line())
        try:
            user = self.table.player(self.registry, alias)
        except UnknownAliasError:
            self._write("El alias que ingreso no existe\n")
            self._pause("Presione enter para volver al menu\n")
            user = None
        except InactiveUserError:
            self._write("El alias no esta activo\n")
            self._pause("Presione enter para volver al menu\n")
            user = None

        keep_going = user is not None
        while keep_going:
            if user.balance <= 0:
                self._write("Usted no tiene saldo para continuar jugando\n")
                self._pause("Presione enter para volver al menu\n")
                break
            choice = None
            while choice not in (1, 2, 3):
                self._write("\nO O O\n1 2 3\n")
                self._write("Copa?: ")
                choice = self._read_int()
            while True:
                self._write("Apuesta?: ")
                amount = self._read_int()
                if amount is not None and 0 < amount <= user.balance:
                    break
                self._write("Incorrecto ingrese de nuevo\n")
            try:
                result = self.table.play(user, choice, amount)
            except GameError as exc:
                self._write(f"{exc}\n")
                break
            self._write(format_cups("." if result.revealed else " ", result.cup))
            self._write("Ha acertado!\n" if result.won else "No ha acertado\n")
            self._write(f"Saldo Final: ${user.balance}\n")
            self._write("Desea seguir apostando? ")
            keep_going = self._confirm()
        self.clear()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="copas", description="Guess the cup hiding the ball.")
    parser.parse_args(argv)
    Console().run()
    return 0