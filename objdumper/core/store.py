"""Object store traversal.

A git loose-object store keeps every object under a directory named after
the first two hex digits of its hash, in a file named after the rest:

    .git/objects/ab/cdef0123...

The identifier of an object is rebuilt by gluing the two names back
together. Nothing is validated, so pack files, ``info/`` entries and any
other stray file get an identifier too and are left for git to reject.
"""

from pathlib import Path
from typing import Iterator, Tuple, Union

from objdumper.core.errors import FileReadError

DEFAULT_OBJECTS_DIR = '.git/objects'


def derive_identifier(path: Union[str, Path]) -> str:
    """
    Build an object identifier from a file path.
    
    Args:
        path: Path to a file inside the object store
        
    Returns:
        Parent directory name concatenated with the file name
    """
    path = Path(path)
    return path.parent.name + path.name


def iter_object_files(root: Union[str, Path]) -> Iterator[Path]:
    """
    Walk an object store depth-first and yield its regular files.
    
    Symlinks are neither yielded nor followed, and subdirectories that
    cannot be listed are skipped. Entries of a directory are
    visited in name order.
    
    Args:
        root: Object store directory
        
    Yields:
        Path of each regular file
        
    Raises:
        FileReadError: If root is missing or not a directory
    """
    root = Path(root)
    if not root.exists():
        raise FileReadError(root, "No such directory")
    if not root.is_dir():
        raise FileReadError(root, "Not a directory")
    
    try:
        entries = _list(root)
    except OSError as e:
        raise FileReadError(root, e.strerror or str(e))
    
    yield from _walk(entries)


def _list(directory: Path):
    return sorted(directory.iterdir(), key=lambda p: p.name)


def _walk(entries) -> Iterator[Path]:
    for entry in entries:
        if entry.is_symlink():
            continue
        if entry.is_dir():
            # Unreadable or vanished subdirectories are skipped
            try:
                children = _list(entry)
            except OSError:
                continue
            yield from _walk(children)
        elif entry.is_file():
            yield entry


def iter_identifiers(root: Union[str, Path]) -> Iterator[Tuple[str, Path]]:
    """Yield (identifier, path) for every regular file under root."""
    for path in iter_object_files(root):
        yield derive_identifier(path), path
