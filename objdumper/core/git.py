"""Wrapper around the external git binary."""

import subprocess
from pathlib import Path
from typing import List, Optional, Union

from objdumper.core.errors import ExternalToolError


class GitTool:
    """
    Runs git queries about objects.
    
    Commands are passed as an argument list, never through a shell, so an
    identifier is always a single argument no matter what it contains.
    Output is returned as the bytes git printed, including error messages and
    regardless of the exit status.
    """
    
    def __init__(self, executable: str = 'git',
                 repository: Optional[Union[str, Path]] = None):
        """
        Initialize the tool.
        
        Args:
            executable: Name or path of the git binary
            repository: Directory git should run in (git -C), or None
                for the current working directory
        """
        self.executable = executable
        self.repository = str(repository) if repository else None
    
    def command(self, *args: str) -> List[str]:
        """Build the full argument list for a git invocation."""
        cmd = [self.executable]
        if self.repository:
            cmd += ['-C', self.repository]
        cmd.extend(args)
        return cmd
    
    def run(self, *args: str) -> bytes:
        """
        Run git and return its combined stdout and stderr as raw bytes.
        
        Blocks until git exits. A non-zero exit status is not an error
        here; whatever git printed is returned.
        
        Raises:
            ExternalToolError: If the executable cannot be launched
        """
        cmd = self.command(*args)
        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
            )
        except OSError as e:
            raise ExternalToolError(cmd, e.strerror or str(e))
        
        return result.stdout
    
    def object_type(self, identifier: str) -> bytes:
        """Report the type of an object (git cat-file -t)."""
        return self.run('cat-file', '-t', identifier)
    
    def pretty_print(self, identifier: str) -> bytes:
        """Pretty-print the content of an object (git cat-file -p)."""
        return self.run('cat-file', '-p', identifier)
