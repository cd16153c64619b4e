"""Pydantic v2 models shared by the scaffolder.

``ProjectAnswers`` is collected once from the user and drives every
generation step.  ``StepResult`` and ``GenerationResult`` carry the outcome of
the top-level steps back to the pipeline for reporting.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Model names
# ---------------------------------------------------------------------------

def lower_form(name: str) -> str:
    """Identifier/filename form of a model name: ``"User"`` -> ``"user"``."""
    return name.lower()


def capitalized_form(name: str) -> str:
    """Type/class form of a model name: ``"user"`` -> ``"User"``.

    Only the first character changes; the rest is kept as typed.
    """
    if not name:
        return ""
    return name[0].upper() + name[1:]


class TemplateContext(BaseModel):
    """Per-model values substituted into a template."""

    model_config = ConfigDict(frozen=True)

    lower: str
    capitalized: str

    @classmethod
    def for_model(cls, name: str) -> "TemplateContext":
        return cls(lower=lower_form(name), capitalized=capitalized_form(name))


# ---------------------------------------------------------------------------
# Answers
# ---------------------------------------------------------------------------

class ProjectAnswers(BaseModel):
    """Everything the user told us about the project.

    Model names are kept in the order they were entered.  Duplicates are
    allowed; generating the same name twice rewrites identical files.
    """

    model_config = ConfigDict(frozen=True)

    wants_authorization: bool = Field(default=False, description="Generate auth middleware and install auth packages")
    wants_validation: bool = Field(default=False, description="Generate the validations folder and files")
    models: tuple[str, ...] = Field(default=(), description="Model names in entry order")

    def contexts(self) -> list[TemplateContext]:
        """Return one ``TemplateContext`` per declared model."""
        return [TemplateContext.for_model(name) for name in self.models]


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class StepResult(BaseModel):
    """Outcome of one top-level scaffolding step."""

    name: str
    success: bool = True
    skipped: bool = False
    written: list[Path] = Field(default_factory=list, description="Files written by the step")
    messages: list[str] = Field(default_factory=list, description="Progress lines reported by the step")
    diagnostics: list[str] = Field(default_factory=list, description="Non-fatal problems found while generating")
    error: Optional[str] = None

    @property
    def status(self) -> str:
        if self.skipped:
            return "skipped"
        return "ok" if self.success else "failed"


class GenerationResult(BaseModel):
    """Aggregate of every step run by the pipeline."""

    steps: list[StepResult] = Field(default_factory=list)

    @property
    def success(self) -> bool:
        return all(step.success for step in self.steps)

    @property
    def failed_steps(self) -> list[StepResult]:
        return [step for step in self.steps if not step.success]

    @property
    def diagnostics(self) -> list[str]:
        return [d for step in self.steps for d in step.diagnostics]

    def step(self, name: str) -> StepResult:
        """Return the result of the step called *name*.

        Raises:
            KeyError: If no step with that name ran.
        """
        for step in self.steps:
            if step.name == name:
                return step
        raise KeyError(name)
