"""Config command - manage Objdumper settings."""

import click
from objdumper.core.config import get_config, split_key
from objdumper.core.errors import ConfigError
from objdumper.cli.output import success, error, info


@click.group('config')
def config_cmd():
    """Get and set Objdumper options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
def config_set(key, value):
    """
    Set a config value.
    
    Examples:
        objdumper config set core.git /usr/local/bin/git
        objdumper config set scan.root /srv/repo.git/objects
    """
    section, option = split_key(key)
    try:
        get_config().set(section, option, value)
    except ConfigError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()
    click.echo(success(f"Set config: {key} = {value}"))


@config_cmd.command('get')
@click.argument('key')
def config_get(key):
    """
    Get a config value.
    
    Environment variables such as OBJDUMPER_CORE_GIT override the file.
    
    Examples:
        objdumper config get core.git
    """
    section, option = split_key(key)
    value = get_config().get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {key}"), err=True)
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
def config_unset(key):
    """Remove a config value."""
    section, option = split_key(key)
    try:
        removed = get_config().unset(section, option)
    except ConfigError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()
    if not removed:
        click.echo(error(f"Config key not found: {key}"), err=True)
        raise click.Abort()
    click.echo(success(f"Unset config: {key}"))


@config_cmd.command('list')
def config_list():
    """List all config values."""
    values = get_config().list_all()
    if not values:
        click.echo(info("No configuration set"))
        return
    for section, options in values.items():
        for key, value in options.items():
            click.echo(f"{section}.{key}={value}")
