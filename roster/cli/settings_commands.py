"""Settings CLI commands for Roster.

Manages settings.json - departments, raise defaults, seed file.
"""

import click
import yaml

from roster.sdk import (
    ConfigError,
    RosterSettings,
    load_settings,
    load_roster_settings,
    get_settings_path,
    set_setting,
    unset_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    \b
    Available settings:
    - departments: list of department names
    - raise_threshold: minimum rating for 'roster raise'
    - raise_amount: amount added by 'roster raise'
    - top_paid_limit: default N for 'roster top-paid'
    - first_employee_id: first generated employee ID
    - seed_file: roster YAML loaded at startup
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their effective values."""
    settings_path = get_settings_path()

    try:
        current = load_settings()
        effective = load_roster_settings()
    except ConfigError as e:
        raise click.ClickException(str(e))

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
        click.echo()

    click.echo("Effective settings:")
    for key, value in effective.model_dump().items():
        source = "" if key in current else " (default)"
        click.echo(f"  {key}: {value}{source}")


@settings.command("path")
def settings_path_cmd():
    """Print the path to settings.json."""
    click.echo(str(get_settings_path()))


@settings.command("set")
@click.argument("key", type=click.Choice(list(RosterSettings.model_fields)))
@click.argument("value")
def settings_set(key, value):
    """Set a setting.

    VALUE is read as YAML, so lists and numbers work as expected.

    \b
    Examples:
      roster settings set raise_amount 1500
      roster settings set departments "[HR, IT, Finance]"
      roster settings set seed_file ~/roster.yaml
    """
    try:
        parsed = yaml.safe_load(value)
    except yaml.YAMLError as e:
        raise click.BadParameter(f"Invalid value: {e}", param_hint="VALUE")

    try:
        path = set_setting(key, parsed)
    except ConfigError as e:
        raise click.ClickException(str(e))

    click.echo(f"Set {key}: {parsed}")
    click.echo(f"Saved to: {path}")


@settings.command("unset")
@click.argument("key")
def settings_unset(key):
    """Remove a setting, reverting it to its default."""
    try:
        cleared = unset_setting(key)
    except ConfigError as e:
        raise click.ClickException(str(e))

    if cleared:
        click.echo(f"Cleared {key}.")
    else:
        click.echo(f"{key} was not set.")
