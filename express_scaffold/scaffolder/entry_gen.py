"""Application entry point and initial project files.

``EntryPointComposer`` renders ``index.js``: it mounts one router per model
using the same naming convention as the generated route files, and sets the
CORS ``credentials`` flag from the authorization answer.

``InitialFilesBuilder`` writes ``.env`` with empty settings and creates or
extends ``.gitignore``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..models import ProjectAnswers, StepResult, lower_form
from ..utils import print_info, print_success
from .manifest import ENTRY_FILE, ENV_FILE, GITIGNORE_ENV_ENTRY, GITIGNORE_FILE
from .templates import TemplateRenderer

# Settings emitted (empty) into the generated .env file.
ENV_KEYS: tuple[str, ...] = ("PORT", "DB", "ADMIN", "USER", "JWTKEY")


def route_import_line(model: str) -> str:
    lower = lower_form(model)
    return f'const {lower}Routes = require("./routes/{lower}Routes");'


def route_mount_line(model: str) -> str:
    lower = lower_form(model)
    return f"app.use('/{lower}', {lower}Routes);"


class EntryPointComposer:
    """Renders the generated application's ``index.js``."""

    step_name = "entry point"

    def __init__(self, project_dir: str | Path, renderer: TemplateRenderer | None = None) -> None:
        self.project_dir = Path(project_dir)
        self.renderer = renderer or TemplateRenderer()

    def context(self, answers: ProjectAnswers) -> dict[str, object]:
        return {
            "route_imports": [route_import_line(name) for name in answers.models],
            "route_mounts": [route_mount_line(name) for name in answers.models],
            "credentials": answers.wants_authorization,
        }

    def render(self, answers: ProjectAnswers) -> str:
        """Return the ``index.js`` text for *answers* without writing it."""
        return self.renderer.render(ENTRY_FILE.template, self.context(answers))

    async def build(self, answers: ProjectAnswers) -> StepResult:
        result = StepResult(name=self.step_name)
        path = await self.renderer.render_to_file(
            ENTRY_FILE.template, self.project_dir / ENTRY_FILE.path, self.context(answers)
        )
        print_success(f"{path.name} file created successfully.")
        result.written.append(path)
        result.messages.append(f"{path.name} file created successfully.")
        return result


class InitialFilesBuilder:
    """Writes ``.env`` and creates or extends ``.gitignore``."""

    step_name = "initial files"

    def __init__(self, project_dir: str | Path, renderer: TemplateRenderer | None = None) -> None:
        self.project_dir = Path(project_dir)
        self.renderer = renderer or TemplateRenderer()

    async def build(self, answers: ProjectAnswers) -> StepResult:
        result = StepResult(name=self.step_name)

        env_path = await self.renderer.render_to_file(
            ENV_FILE.template, self.project_dir / ENV_FILE.path, {"env_keys": ENV_KEYS}
        )
        self._report(result, f"{ENV_FILE.path} file created successfully.", success=True)
        result.written.append(env_path)

        gitignore_path = self.project_dir / GITIGNORE_FILE.path
        if not gitignore_path.exists():
            await self.renderer.render_to_file(
                GITIGNORE_FILE.template, gitignore_path, {"env_entry": GITIGNORE_ENV_ENTRY}
            )
            self._report(result, f"{GITIGNORE_FILE.path} file created successfully.", success=True)
            result.written.append(gitignore_path)
            return result

        existing = await asyncio.to_thread(gitignore_path.read_text, encoding="utf-8")
        if GITIGNORE_ENV_ENTRY in existing:
            self._report(result, ".env is already in .gitignore.")
            return result

        await asyncio.to_thread(_append_line, gitignore_path, existing, GITIGNORE_ENV_ENTRY)
        self._report(result, ".env added to .gitignore.", success=True)
        result.written.append(gitignore_path)
        return result

    @staticmethod
    def _report(result: StepResult, message: str, success: bool = False) -> None:
        if success:
            print_success(message)
        else:
            print_info(message)
        result.messages.append(message)


def _append_line(path: Path, existing: str, line: str) -> None:
    separator = "" if not existing or existing.endswith("\n") else "\n"
    with path.open("a", encoding="utf-8") as handle:
        handle.write(f"{separator}{line}\n")
