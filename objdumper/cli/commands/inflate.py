"""Inflate a zlib-compressed file to standard output."""

import click
from objdumper.core.errors import FileReadError, DecompressionError
from objdumper.core.inflate import inflate_file
from objdumper.cli.output import error


@click.command('inflate-file')
@click.argument('path')
def inflate_file_cmd(path):
    """
    Decompress a file and write the raw bytes to standard output.
    
    Handy for looking inside a loose object, header included.
    
    Examples:
        objdumper inflate-file .git/objects/ab/cdef0123...
    """
    try:
        data = inflate_file(path)
    except (FileReadError, DecompressionError) as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()
    
    click.echo(data, nl=False)
