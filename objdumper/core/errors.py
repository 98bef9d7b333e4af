"""Error types raised by Objdumper."""


class ObjectDumperError(Exception):
    """Base class for all Objdumper errors."""


class FileReadError(ObjectDumperError):
    """A path could not be opened or read."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read {self.path}: {reason}")


class DecompressionError(ObjectDumperError):
    """Input bytes are not a valid zlib stream."""

    def __init__(self, path, reason: str):
        self.path = str(path) if path is not None else None
        self.reason = reason
        if self.path:
            message = f"Cannot inflate {self.path}: {reason}"
        else:
            message = f"Cannot inflate data: {reason}"
        super().__init__(message)


class ExternalToolError(ObjectDumperError):
    """The external tool could not be started."""

    def __init__(self, command, reason: str):
        self.command = list(command)
        self.reason = reason
        super().__init__(f"Failed to run {self.command[0]}: {reason}")


class ConfigError(ObjectDumperError):
    """The configuration file cannot be parsed or written."""

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Config {self.path}: {reason}")
