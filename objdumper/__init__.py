"""Objdumper - dump git loose objects and inflate zlib streams."""

__version__ = '0.1.0'
__author__ = 'Flambeau Iriho'
__email__ = 'irihoflambeau@gmail.com'

from objdumper.core.store import derive_identifier, iter_object_files
from objdumper.core.git import GitTool
from objdumper.core.inflate import inflate_file

__all__ = [
    'derive_identifier',
    'iter_object_files',
    'GitTool',
    'inflate_file',
]
