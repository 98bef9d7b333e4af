"""Core functionality for Objdumper.

This module contains:
- Object store traversal and identifier derivation
- The external git tool wrapper
- zlib inflation of raw object files
- Configuration management
- Error types

For the command-line surface, see objdumper.cli
"""

from objdumper.core.errors import (ObjectDumperError, FileReadError,
                                   DecompressionError, ExternalToolError, ConfigError)
from objdumper.core.store import (DEFAULT_OBJECTS_DIR, derive_identifier,
                                  iter_object_files, iter_identifiers)
from objdumper.core.git import GitTool
from objdumper.core.inflate import read_blob, inflate_bytes, inflate_file
from objdumper.core.config import Config, get_config

__all__ = [
    'ObjectDumperError',
    'FileReadError',
    'DecompressionError',
    'ExternalToolError',
    'ConfigError',
    'DEFAULT_OBJECTS_DIR',
    'derive_identifier',
    'iter_object_files',
    'iter_identifiers',
    'GitTool',
    'read_blob',
    'inflate_bytes',
    'inflate_file',
    'Config',
    'get_config',
]
