"""Exceptions raised in one layer and handled in another.

Per-file I/O problems during scans are logged and counted where they happen;
only failures that a caller has to decide about get a type here.
"""

from typing import Optional


class AtomicShadcnError(Exception):
    """Base class for errors raised by atomic_shadcn."""


class InvalidComponentIdError(AtomicShadcnError, ValueError):
    """Raised when a component id is empty or not a lowercase hyphenated name."""


class ManifestNotFoundError(AtomicShadcnError, FileNotFoundError):
    """Raised when the project has no package.json."""


class ManifestError(AtomicShadcnError):
    """Raised when package.json cannot be parsed or has an unexpected shape."""


class ExternalToolError(AtomicShadcnError):
    """Raised when an external command exits non-zero or cannot be started."""

    def __init__(self, command: str, message: str, output: Optional[str] = None):
        super().__init__(f"{command}: {message}")
        self.command = command
        self.output = output or ""
