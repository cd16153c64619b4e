"""Shared utility files: DB connection, upload handling, response messages.

These templates take no per-model input and are rewritten on every run.
"""

from __future__ import annotations

from pathlib import Path

from ..models import ProjectAnswers, StepResult
from ..utils import print_success
from .folders import ensure_reported_folder
from .manifest import CONFIGURATIONS_FOLDER, UTILITY_FILES, shared_files_for
from .templates import TemplateRenderer


class UtilitiesBuilder:
    """Creates ``utilities/configurations/`` and the shared utility files."""

    step_name = "utilities"

    def __init__(self, project_dir: str | Path, renderer: TemplateRenderer | None = None) -> None:
        self.project_dir = Path(project_dir)
        self.renderer = renderer or TemplateRenderer()

    async def build(self, answers: ProjectAnswers) -> StepResult:
        result = StepResult(name=self.step_name)
        await ensure_reported_folder(
            self.project_dir / CONFIGURATIONS_FOLDER, "configurations", result
        )
        for spec in shared_files_for(answers, UTILITY_FILES):
            path = await self.renderer.render_to_file(
                spec.template, self.project_dir / spec.path, {}
            )
            print_success(f"{path.name} created successfully.")
            result.written.append(path)
            result.messages.append(f"{path.name} created successfully.")
        return result
