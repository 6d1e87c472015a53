import io

from copas.cli import Console, format_bets, format_cups, format_user
from copas.game import Registry, Table
from copas.models import INITIAL_BALANCE, BirthDate, PersonalData, parse_ci


def make_console(lines, registry=None):
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    console = Console(registry or Registry(), Table(), stdin, stdout, lambda: None)
    return console, stdout


def registry_with_ana():
    registry = Registry()
    registry.add(PersonalData(parse_ci("12345678"), BirthDate(1, 1, 2000), "Ana", "Perez", "ana"))
    return registry


def test_format_cups():
    assert format_cups(".", 2) == "O . O\n\n"
    assert format_cups(" ", 1) == "  O O\n\n"


def test_format_user():
    text = format_user(registry_with_ana().find("ana"))
    assert "CI: 12345678" in text
    assert "\nAlias: ana" in text
    assert "\nNombre: Ana" in text


def test_format_bets_rows():
    registry = registry_with_ana()
    user = registry.find("ana")
    Table().play(user, 1, 100)
    rows = format_bets(user).splitlines()
    assert rows[0] == "ACERTO       MONTO APOSTADO    SALDO RESULTANTE"
    assert len(rows) == 2
    assert rows[1].startswith("   SI")
    assert str(user.balance) in rows[1]


def test_register_and_bet_session():
    lines = [
        "1", "1", "ana", "11111111", "12345678", "1/1/2000", "Ana", "Perez", "s", "",
        "3", "ana", "1", "100", "n",
        "4",
    ]
    console, stdout = make_console(lines)
    console.run()
    output = stdout.getvalue()
    assert "Cedula no valida" in output
    assert "El usuario se ha creado correctamente" in output
    assert "Ha acertado!" in output
    assert output.endswith("Gracias por jugar! :)")
    assert console.registry.find("ana").balance == INITIAL_BALANCE + 100


def test_register_duplicate_alias():
    console, stdout = make_console(["ana", ""], registry_with_ana())
    console.register()
    assert "Ya existe un usuario con ese Alias" in stdout.getvalue()
    assert len(console.registry) == 1


def test_register_declined():
    console, stdout = make_console(["bob", "00000000", "2/3/1999", "Bob", "Diaz", "n", ""])
    console.register()
    assert "El usuario no ha sido creado" in stdout.getvalue()
    assert len(console.registry) == 0


def test_modify_user():
    lines = ["ana", "00000000", "31/2/2000", "2/2/1990", "Anita", "Gomez", "s", ""]
    console, stdout = make_console(lines, registry_with_ana())
    console.modify()
    user = console.registry.find("ana")
    assert "Fecha incorrecta" in stdout.getvalue()
    assert user.data.name == "Anita"
    assert user.data.birth_date == BirthDate(2, 2, 1990)


def test_bet_unknown_alias():
    console, stdout = make_console(["bob", ""])
    console.bet()
    assert "El alias que ingreso no existe" in stdout.getvalue()
    assert console.table.round == 0


def test_bet_rejects_bad_amount_then_loses():
    registry = registry_with_ana()
    console, stdout = make_console(["ana", "5", "2", "0", "50", "n"], registry)
    console.bet()
    output = stdout.getvalue()
    assert "Incorrecto ingrese de nuevo" in output
    assert "No ha acertado" in output
    assert registry.find("ana").balance == INITIAL_BALANCE - 50


def test_list_players_only_active_sorted():
    registry = registry_with_ana()
    registry.add(PersonalData(parse_ci("00000000"), BirthDate(1, 1, 2000), "A", "B", "zed"))
    registry.add(PersonalData(parse_ci("00000000"), BirthDate(1, 1, 2000), "A", "B", "bob"))
    registry.find("zed").active = False
    console, stdout = make_console([""], registry)
    console.list_players()
    output = stdout.getvalue()
    assert "Alias: zed" not in output
    assert output.index("Alias: ana") < output.index("Alias: bob")


def test_invalid_menu_option_reprompts():
    console, stdout = make_console(["9", "", "4"])
    assert console.main_menu() == 4
    assert "Opcion no existe, vuelva a intentarlo" in stdout.getvalue()


def test_run_ends_on_end_of_input():
    console, stdout = make_console([])
    console.run()
    assert stdout.getvalue().endswith("Gracias por jugar! :)")