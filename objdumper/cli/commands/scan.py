"""Scan an object store and dump every object through git."""

import os

import click
from objdumper.core.config import get_config
from objdumper.core.errors import FileReadError, ExternalToolError
from objdumper.core.git import GitTool
from objdumper.core.store import DEFAULT_OBJECTS_DIR, iter_identifiers
from objdumper.cli.output import error


@click.command('scan-objects')
@click.argument('root', required=False)
@click.option('--git', 'git_executable', help='git executable to run (default: git)')
@click.option('-C', '--repository', help='Run git in this directory')
def scan_objects_cmd(root, git_executable, repository):
    """
    Dump every object found in an object store.
    
    Walks ROOT (default: .git/objects) and, for each file, prints its hash,
    the object type and the pretty-printed content as git reports them.
    Git's own error messages are printed in place of the output when a
    query fails.
    
    Examples:
        objdumper scan-objects                      # Scan .git/objects
        objdumper scan-objects path/to/.git/objects -C path/to
    """
    config = get_config()
    if root is None:
        root = config.get('scan', 'root', DEFAULT_OBJECTS_DIR)
    git = GitTool(
        executable=git_executable or config.get('core', 'git', 'git'),
        repository=repository or config.get('core', 'repository'),
    )
    
    try:
        for identifier, _ in iter_identifiers(root):
            dump_object(git, identifier)
    except FileReadError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()


def dump_object(git, identifier):
    """Print one Hash/Type/content block followed by a blank line."""
    block = (
        b"Hash: " + os.fsencode(identifier) + b"\n"
        + b"Type: " + _query(git.object_type, identifier)
        + _query(git.pretty_print, identifier)
        + b"\n"
    )
    click.echo(block, nl=False)


def _query(method, identifier):
    try:
        output = method(identifier)
    except ExternalToolError as e:
        output = str(e).encode('utf-8')
    return _line(output)


def _line(data):
    return data if data.endswith(b'\n') else data + b'\n'
