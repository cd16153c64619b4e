"""Shared pytest fixtures for the express-scaffold test suite.

Provides reusable fixtures for:
- Temporary project directories
- Typical answer sets (plain, validation, authorization, no models)
- A real TemplateRenderer over the packaged templates
- Scripted prompt replies
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

import pytest

from express_scaffold.models import ProjectAnswers
from express_scaffold.scaffolder.templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Empty directory to scaffold into (auto-cleanup)."""
    path = tmp_path / "my-api"
    path.mkdir()
    return path


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

@pytest.fixture
def plain_answers() -> ProjectAnswers:
    """One model, no validation, no authorization."""
    return ProjectAnswers(wants_authorization=False, wants_validation=False, models=("user",))


@pytest.fixture
def full_answers() -> ProjectAnswers:
    """Two models with validation and authorization."""
    return ProjectAnswers(
        wants_authorization=True,
        wants_validation=True,
        models=("user", "Product"),
    )


@pytest.fixture
def empty_answers() -> ProjectAnswers:
    """No models at all."""
    return ProjectAnswers(wants_authorization=False, wants_validation=False, models=())


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

@pytest.fixture
def renderer() -> TemplateRenderer:
    """TemplateRenderer over the packaged templates."""
    return TemplateRenderer()


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------

class ScriptedAsk:
    """Stand-in for the interactive prompt that replays canned replies.

    Every question asked is recorded in ``questions``.
    """

    def __init__(self, replies: Iterable[str]) -> None:
        self._replies = list(replies)
        self.questions: list[str] = []

    def __call__(self, message: str) -> str:
        self.questions.append(message)
        if not self._replies:
            raise EOFError("no more scripted replies")
        return self._replies.pop(0)


@pytest.fixture
def scripted_ask() -> Callable[[Iterable[str]], ScriptedAsk]:
    """Factory for ``ScriptedAsk`` instances."""
    return ScriptedAsk
