"""Exception hierarchy for express-scaffold."""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for errors raised while scaffolding a project."""


class CommandError(ScaffoldError):
    """Raised when a package-manager command fails.

    A command fails when it exits non-zero or writes anything to stderr.
    """

    def __init__(
        self,
        command: str,
        returncode: int,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.command = command
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        detail = stderr or f"exit code {returncode}"
        super().__init__(f"Error executing command: {detail}")
