"""npm dependency installation for the generated project.

Runs the package manager once per package, strictly one after another so the
package manager never contends for its own lock file.  The first failing
command raises ``CommandError`` and the remaining installs are abandoned.
"""

from __future__ import annotations

from pathlib import Path

from .exceptions import CommandError
from .models import ProjectAnswers
from .utils import print_info, run_command

# (label, package) pairs installed for every project.
BASE_PACKAGES: list[tuple[str, str]] = [
    ("Express", "express"),
    ("Mongoose", "mongoose"),
    ("dotenv", "dotenv"),
    ("CORS", "cors"),
    ("Multer", "multer"),
]

# Installed only when the project asks for authorization.
AUTH_PACKAGES: list[tuple[str, str]] = [
    ("JWT", "jsonwebtoken"),
    ("argon2", "argon2"),
]


class DependencyInstaller:
    """Installs the fixed npm package set into the project directory."""

    def __init__(
        self,
        project_dir: str | Path,
        package_manager: str = "npm",
        timeout: int = 300,
    ) -> None:
        self.project_dir = Path(project_dir)
        self.package_manager = package_manager
        self.timeout = timeout

    def plan(self, answers: ProjectAnswers) -> list[tuple[str, list[str]]]:
        """Return the ordered ``(announcement, argv)`` commands for *answers*."""
        commands: list[tuple[str, list[str]]] = [
            ("Initializing new Node.js project...", [self.package_manager, "init", "-y"]),
        ]
        packages = list(BASE_PACKAGES)
        if answers.wants_authorization:
            packages.extend(AUTH_PACKAGES)
        for label, package in packages:
            commands.append((f"Installing {label}...", [self.package_manager, "i", package]))
        return commands

    async def install(self, answers: ProjectAnswers) -> list[str]:
        """Run every planned command in order.

        Returns:
            The stdout of each command, in order.

        Raises:
            CommandError: On the first command that exits non-zero or writes
                to stderr.
        """
        outputs: list[str] = []
        for announcement, argv in self.plan(answers):
            print_info(announcement)
            outputs.append(await self.run(argv))
        return outputs

    async def run(self, argv: list[str]) -> str:
        """Run a single command and return its stdout."""
        returncode, stdout, stderr = await run_command(
            argv, cwd=self.project_dir, timeout=self.timeout
        )
        if returncode != 0 or stderr:
            raise CommandError(" ".join(argv), returncode, stdout, stderr)
        if stdout:
            print_info(stdout)
        return stdout
