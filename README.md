# copas

`copas` is a small console game. You register players with an alias and some
personal data. The players then bet on which of three cups hides the ball.

## Installing

```
pip install .
```

## Playing

```
copas
```

The game talks to you in Spanish. The main menu has four options.

1. **Gestionar Usuarios** is for managing players.
   - *Alta de Jugador* registers a new player.
   - *Modificacion de Jugador* changes the CI, birth date, name and surname of
     an existing player.
   - Aliases must be unique.
   - Text fields are cut to 15 characters.
   - The identity number (CI) has eight digits, and its check digit must be
     right.
   - The birth date is typed as `dd/mm/aaaa`. The year must be between 1925
     and 2025.
   - Every new player starts with a balance of 1000.
   - At most five players can be registered.
2. **Consultas** is for looking things up.
   - *Listado de Jugadores* lists the active players, sorted by alias, with
     their balance.
   - *Listado de Apuestas por Jugador* shows one player's bets in the order
     they were made.
3. **Apostar** is for betting.
   - Pick a cup (1, 2 or 3) and stake any amount up to your balance.
   - The cup that hides the ball rotates from round to round.
   - A correct guess wins the stake. A wrong guess loses it.
   - You cannot win three times in a row. A third correct guess in a row
     counts as a loss.
   - A player whose balance is zero or less cannot bet.
4. **Salir** leaves the game. The game also ends when input runs out.

## Using it as a library

You can use the game logic without the console:

```python
from copas.game import Registry, Table
from copas.models import PersonalData, parse_ci, parse_date

registry = Registry(5)
registry.add(PersonalData(
    ci=parse_ci("12345678"),
    birth_date=parse_date("01/02/1990"),
    name="Ana",
    surname="Perez",
    alias="ana",
))

table = Table(0)
user = table.player(registry, "ana")
result = table.play(user, choice=1, amount=100)
print(result.won, result.cup, user.balance)
```

### Errors

- `parse_ci` and `parse_date` raise `ValidationError`, a subclass of
  `ValueError`, for input they reject.
- `Registry.add` raises `DuplicateAliasError` for an alias that is already
  taken, and `RegistryFullError` when the registry is full.
- `Registry.find` and `Registry.modify` raise `UnknownAliasError` for an alias
  that is not registered.
- `Table.player` raises `UnknownAliasError` or `InactiveUserError` for a player
  who cannot bet.
- `Table.play` raises `InvalidBetError` when the cup or the amount is outside
  the allowed range, and `NoBalanceError` when the player has nothing left.

All of these except `ValidationError` derive from `GameError`.

`copas.cli.Console` runs the menus. You can give it your own registry, table,
input and output streams, and screen-clearing function.

## What it does not do

- Nothing is saved. Players and bets live only as long as the program runs.
- *Baja de Jugador* is in the user menu, but it does nothing. Players cannot be
  removed or made inactive.
- *Listado de todas las Apuestas* is in the queries menu, but it does nothing.
  Bets can only be listed one player at a time.