"""Top-level folder creation.

Creates every folder the manifest calls for directly under the project
directory.  Folders that already exist are left untouched, so running the
builder twice is harmless.
"""

from __future__ import annotations

import asyncio
from pathlib import Path

from ..models import ProjectAnswers, StepResult
from ..utils import ensure_folder, print_info
from .manifest import folders_for


async def ensure_reported_folder(path: Path, label: str, result: StepResult) -> bool:
    """Create *path* if needed and record the outcome on *result*.

    Returns:
        ``True`` if the folder was created, ``False`` if it already existed.
    """
    created = await asyncio.to_thread(ensure_folder, path)
    message = f"{label} folder created." if created else f"{label} folder already exists."
    print_info(message)
    result.messages.append(message)
    if created:
        result.written.append(path)
    return created


class FolderBuilder:
    """Ensures the project's top-level folders exist."""

    step_name = "folders"

    def __init__(self, project_dir: str | Path) -> None:
        self.project_dir = Path(project_dir)

    async def build(self, answers: ProjectAnswers) -> StepResult:
        """Create the folders *answers* calls for.

        ``written`` on the returned result lists only the folders this call
        created.
        """
        result = StepResult(name=self.step_name)
        for name in folders_for(answers):
            await ensure_reported_folder(self.project_dir / name, name, result)
        return result
