"""Main CLI entry point for Objdumper."""

import click
from colorama import init

from objdumper import __version__
from objdumper.core.config import get_config
from objdumper.cli.output import BANNER, set_color, warning
from objdumper.cli.commands import scan_objects_cmd, inflate_file_cmd, config_cmd

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class ObjdumperGroup(click.Group):
    """Custom Group class to display banner before help."""
    
    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=ObjdumperGroup)
@click.version_option(version=__version__)
def cli():
    """Dump git loose objects and inflate zlib-compressed files."""
    config = get_config()
    set_color(config.get_bool('color', 'ui', True))
    if config.load_error is not None:
        click.echo(warning(f"Ignoring malformed config {config.config_path}"), err=True)


# Register commands
cli.add_command(scan_objects_cmd)
cli.add_command(inflate_file_cmd)
cli.add_command(config_cmd)

def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
