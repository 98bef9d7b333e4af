"""CLI commands for Objdumper."""

from objdumper.cli.commands.scan import scan_objects_cmd
from objdumper.cli.commands.inflate import inflate_file_cmd
from objdumper.cli.commands.config import config_cmd

__all__ = ['scan_objects_cmd', 'inflate_file_cmd', 'config_cmd']
