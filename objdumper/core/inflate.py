"""Read a file and inflate its zlib stream."""

import zlib
from pathlib import Path
from typing import Optional, Union

from objdumper.core.errors import FileReadError, DecompressionError


def read_blob(path: Union[str, Path]) -> bytes:
    """
    Read a whole file into memory.
    
    Raises:
        FileReadError: If the path is missing or cannot be read
    """
    path = Path(path)
    try:
        return path.read_bytes()
    except FileNotFoundError:
        raise FileReadError(path, "No such file")
    except IsADirectoryError:
        raise FileReadError(path, "Is a directory")
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e))


def inflate_bytes(data: bytes, path: Optional[Union[str, Path]] = None) -> bytes:
    """
    Decompress a complete zlib stream.
    
    An empty buffer is not a valid stream and is rejected too.
    
    Args:
        data: Compressed bytes
        path: Where the bytes came from, used in error messages
        
    Returns:
        Decompressed bytes
        
    Raises:
        DecompressionError: If data is not valid zlib data
    """
    try:
        return zlib.decompress(data)
    except zlib.error as e:
        raise DecompressionError(path, str(e))


def inflate_file(path: Union[str, Path]) -> bytes:
    """Read a file and return its decompressed content."""
    return inflate_bytes(read_blob(path), path)
