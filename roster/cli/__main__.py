"""Roster CLI - Command-line interface for the in-memory employee roster."""

import logging
import os
import shlex

import click

from roster import __version__
from roster.sdk import RosterError, load_roster_settings

from .employee_commands import employees as employee_group
from .session import Session
from .settings_commands import settings as settings_group

SHELL_EXIT_WORDS = {"exit", "quit", "q"}


def configure_logging(debug: bool = False) -> None:
    """Configure logging from LOG_LEVEL (default WARNING); --debug forces DEBUG."""
    if debug:
        level = logging.DEBUG
    else:
        level_name = os.environ.get("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, level_name, logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S",
    )


@click.group()
@click.version_option(version=__version__, prog_name="roster")
@click.option("--seed", type=click.Path(dir_okay=False),
              help="Roster YAML to load at startup (overrides the seed_file setting).")
@click.option("--debug", is_flag=True, help="Show debug logging.")
@click.pass_context
def cli(ctx, seed, debug):
    """Roster - In-memory employee roster.

    Employees live in memory for the life of the process. Use 'roster shell'
    to work with one roster across many commands, or --seed to start from
    a YAML roster file.

    Settings are loaded from (in order):

    \b
    1. ROSTER_CONFIG_PATH environment variable
    2. ~/.config/roster/settings.json (XDG default)
    """
    configure_logging(debug)

    # Settings commands must work even when settings.json is broken
    if ctx.invoked_subcommand == "settings":
        return

    try:
        ctx.obj = Session.from_settings(load_roster_settings(), seed_file=seed)
    except RosterError as e:
        raise click.ClickException(str(e))


# Roster commands are shared with the shell
for _command in employee_group.commands.values():
    cli.add_command(_command)

cli.add_command(settings_group)


@cli.command("shell")
@click.pass_obj
def shell(session: Session):
    """Interactive roster shell.

    Runs roster commands against one in-memory roster until 'exit'.
    Type 'help' for the list of commands.
    """
    click.echo(f"Roster shell ({len(session.store)} employees). Type 'help' for commands, 'exit' to quit.")

    while True:
        try:
            line = click.prompt("roster", prompt_suffix="> ", default="", show_default=False)
        except click.Abort:
            click.echo()
            break

        line = line.strip()
        if not line:
            continue
        if line.lower() in SHELL_EXIT_WORDS:
            break

        try:
            argv = shlex.split(line)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            continue

        if argv[0] == "help":
            argv = ["--help"]

        try:
            employee_group.main(args=argv, prog_name="roster", obj=session, standalone_mode=False)
        except click.ClickException as e:
            e.show()
        except click.Abort:
            click.echo("Aborted.")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
