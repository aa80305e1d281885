"""Prompt commands, one handler per name in COMMANDS.

Handlers take the session plus positional arguments, write through
``session.echo`` and raise ``GodexError`` subclasses on failure.
"""

import logging
import random
from dataclasses import dataclass, field
from functools import partial
from typing import Callable

import click

from godex.config import settings
from godex.errors import ExitRequested, GodexError, NotRegisteredError, UsageError
from godex.models import Pokemon
from godex.services import pokeapi
from godex.services.cache import Cache

logger = logging.getLogger(__name__)

# Rolls are uniform over [0, CATCH_ROLL_CEILING); a roll above the
# Pokemon's base experience is a catch.
CATCH_ROLL_CEILING = 620


@dataclass
class Session:
    """State shared by every command for the lifetime of one prompt."""

    cache: Cache
    location_page: int = 0
    godex: dict[str, Pokemon] = field(default_factory=dict)
    echo: Callable[[str], None] = click.echo
    # Writes without a trailing newline, for the input prompt
    show_prompt: Callable[[str], None] = partial(click.echo, nl=False)
    rng: random.Random = field(default_factory=random.Random)
    page_size: int = field(default_factory=lambda: settings.page_size)


@dataclass(frozen=True)
class Command:
    name: str
    description: str
    callback: Callable[..., None]


def _single_arg(args: tuple[str, ...], missing: str, extra: str) -> str:
    if len(args) < 1:
        raise UsageError("not enough arguments", missing)
    if len(args) > 1:
        raise UsageError("too many arguments", extra)
    return args[0]


def command_help(session: Session, *args: str) -> None:
    for cmd in COMMANDS.values():
        session.echo(f"{cmd.name}: {cmd.description}")


def command_exit(session: Session, *args: str) -> None:
    session.echo("Exiting Godex...")
    raise ExitRequested()


def _print_location_page(session: Session, page: int) -> None:
    first = (page - 1) * session.page_size + 1
    for area_id in range(first, first + session.page_size):
        area = pokeapi.get_location_area(session.cache, area_id)
        session.echo(area.name)


def _show_page(session: Session, page: int) -> None:
    previous = session.location_page
    session.location_page = page
    try:
        _print_location_page(session, page)
    except BaseException:
        session.location_page = previous
        raise


def command_map(session: Session, *args: str) -> None:
    _show_page(session, session.location_page + 1)


def command_mapb(session: Session, *args: str) -> None:
    if session.location_page < 2:
        raise UsageError("location page must be 2 or greater", "No previous page to display")
    _show_page(session, session.location_page - 1)


def command_explore(session: Session, *args: str) -> None:
    area_id = _single_arg(args, "Please provide a location ID", "Only one location may be accepted")
    try:
        area = pokeapi.get_location_area(session.cache, area_id)
    except GodexError as e:
        raise GodexError(str(e), "Invalid Location ID") from e

    for encounter in area.pokemon_encounters:
        session.echo(encounter.pokemon.name)


def command_catch(session: Session, *args: str) -> None:
    name = _single_arg(args, "Please provide a Pokemon to catch", "Only one Pokemon may be accepted")
    try:
        pokemon = pokeapi.get_pokemon(session.cache, name)
    except GodexError as e:
        raise GodexError(str(e), "Invalid Pokemon") from e

    session.echo(f"Throwing a Pokeball at {pokemon.name}...")
    roll = session.rng.randrange(CATCH_ROLL_CEILING)
    logger.debug("Catch roll %d vs base experience %s", roll, pokemon.base_experience)
    if roll > (pokemon.base_experience or 0):
        session.echo(f"{pokemon.name} was caught!")
        session.godex[pokemon.name] = pokemon
    else:
        session.echo(f"{pokemon.name} fled!")


def format_pokemon(pokemon: Pokemon) -> str:
    lines = [
        f"Name: {pokemon.name}",
        f"Height: {pokemon.height}",
        f"Weight: {pokemon.weight}",
        "Stats:",
    ]
    lines.extend(f"  -{s.stat.name}: {s.base_stat}" for s in pokemon.stats)
    lines.append("Types:")
    lines.extend(f"  -{t.type.name}" for t in sorted(pokemon.types, key=lambda t: t.slot))
    return "\n".join(lines)


def command_inspect(session: Session, *args: str) -> None:
    name = _single_arg(args, "Please provide the name of a Pokemon", "Only one Pokemon may be accepted")
    pokemon = session.godex.get(name)
    if pokemon is None:
        raise NotRegisteredError(name)
    session.echo(format_pokemon(pokemon))


def command_godex(session: Session, *args: str) -> None:
    if not session.godex:
        raise GodexError("godex is empty", "Your Godex is empty")
    session.echo("\n".join(["Your Godex:", *(f"  -{name}" for name in session.godex)]))


COMMANDS: dict[str, Command] = {
    cmd.name: cmd
    for cmd in (
        Command("help", "Displays a help message", command_help),
        Command("exit", "Exit the Godex", command_exit),
        Command("map", "Tabs through pages of locations", command_map),
        Command("mapb", "Tabs to a previous location page", command_mapb),
        Command("explore", "Explores an area for Pokemon", command_explore),
        Command("catch", "Catch a Pokemon", command_catch),
        Command("inspect", "View a Pokemon's details if it has been registered in Godex", command_inspect),
        Command("godex", "View a list of Pokemon registered in your Godex", command_godex),
    )
}
