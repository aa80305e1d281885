"""Godex prompt entry point."""

import logging
import sys
from typing import TextIO

import click

from godex import __version__
from godex.commands import COMMANDS, Session
from godex.config import settings
from godex.errors import ExitRequested, handle_error
from godex.services import pokeapi
from godex.services.cache import Cache, new_cache

logger = logging.getLogger(__name__)

PROMPT = "Godex > "


def configure_logging(level: str | None = None) -> None:
    """JSON lines for production, human-readable for local. Always stderr."""
    level = (level or settings.log_level).upper()
    if settings.is_production:
        fmt = '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}'
    else:
        fmt = "%(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt, stream=sys.stderr, force=True)


def create_session(cache: Cache | None = None, **kwargs) -> Session:
    if cache is None:
        cache = new_cache(settings.cache_ttl_seconds)
    return Session(cache=cache, **kwargs)


def dispatch(session: Session, line: str) -> None:
    """Run one input line. ExitRequested propagates; other errors are reported."""
    words = line.split()
    if not words:
        return
    name, args = words[0], words[1:]
    cmd = COMMANDS.get(name)
    if cmd is None:
        session.echo("Invalid command. Use `help` for a list of commands.")
        return

    logger.debug("Running %s %s", name, args)
    try:
        cmd.callback(session, *args)
    except ExitRequested:
        raise
    except Exception as e:
        handle_error(e, session.echo)


def run_repl(session: Session, stream: TextIO) -> None:
    """Read commands from stream until exit or EOF, then stop the cache sweeper."""
    session.echo("Starting Godex...")
    try:
        while True:
            session.echo("")
            session.show_prompt(PROMPT)
            line = stream.readline()
            if not line:
                session.echo("")
                break
            try:
                dispatch(session, line)
            except ExitRequested:
                break
    finally:
        session.cache.close()


@click.command()
@click.version_option(version=__version__, prog_name="godex")
@click.option(
    "--ttl",
    type=float,
    default=None,
    help="Response cache TTL and sweep interval in seconds (default: GODEX_CACHE_TTL_SECONDS or 300)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for stderr diagnostics (default: GODEX_LOG_LEVEL or WARNING)",
)
def main(ttl, log_level):
    """Godex - explore the Pokemon world from your terminal."""
    configure_logging(log_level)
    if ttl is not None:
        settings.cache_ttl_seconds = ttl

    problems = settings.validate()
    if problems:
        raise click.UsageError("; ".join(problems))

    session = create_session()
    try:
        run_repl(session, sys.stdin)
    finally:
        pokeapi.close_client()


if __name__ == "__main__":
    main()
