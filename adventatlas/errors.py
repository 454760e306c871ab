from __future__ import annotations
from typing import Optional


class AdventAtlasError(Exception):
    pass


class MalformedLineError(AdventAtlasError, ValueError):
    """A trace line that matches none of the four grammar forms."""

    def __init__(self, line: str, lineno: Optional[int] = None):
        self.line = line
        self.lineno = lineno
        where = f"line {lineno}: " if lineno is not None else ""
        super().__init__(f"{where}malformed trace line {line!r}")


class NavigationError(AdventAtlasError):
    """`cd` into a directory that does not exist, or `cd ..` at the root."""


class WindowSizeError(AdventAtlasError, ValueError):
    """Marker window narrower than one character."""


class NoCandidateError(AdventAtlasError):
    """No directory is large enough to free the requested space."""


class ConfigError(AdventAtlasError, ValueError):
    pass


class InputNotFoundError(AdventAtlasError, FileNotFoundError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"puzzle input not found: {path}")
