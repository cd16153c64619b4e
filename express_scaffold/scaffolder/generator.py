"""Per-model boilerplate generation.

For every declared model, renders the model, controller, route, validation
and middleware templates the manifest selects and writes them into their
folders, overwriting whatever is there.  When authorization is requested the
shared authorization middleware is rendered once as well.

Route files import the controller, validation and middleware modules of
their model by naming convention.  Before a file is rendered, each module it
imports is checked against the set of files this run generates; a missing
one is reported as a diagnostic.  The file itself is still written as-is.
"""

from __future__ import annotations

from pathlib import Path

from ..models import ProjectAnswers, StepResult, TemplateContext
from ..utils import print_success, print_warning
from .manifest import (
    AUTHORIZATION_MIDDLEWARE,
    MODEL_TEMPLATES,
    ModelTemplate,
    model_templates_for,
)
from .templates import TemplateRenderer

_TEMPLATES_BY_KIND: dict[str, ModelTemplate] = {spec.kind: spec for spec in MODEL_TEMPLATES}


def check_naming_contract(
    spec: ModelTemplate,
    ctx: TemplateContext,
    scheduled: list[ModelTemplate],
) -> list[str]:
    """Return a diagnostic for each module *spec* imports that is not scheduled.

    Args:
        spec: Template about to be rendered.
        ctx: The model it is rendered for.
        scheduled: Per-model templates generated in this run.
    """
    scheduled_kinds = {s.kind for s in scheduled}
    diagnostics: list[str] = []
    for kind in spec.requires:
        if kind in scheduled_kinds:
            continue
        missing = _TEMPLATES_BY_KIND[kind]
        diagnostics.append(
            f"{spec.relative_path(ctx)} requires {missing.relative_path(ctx)}, "
            "which is not generated"
        )
    return diagnostics


class FileTemplater:
    """Renders the per-model files and the shared authorization middleware."""

    step_name = "model files"

    def __init__(self, project_dir: str | Path, renderer: TemplateRenderer | None = None) -> None:
        self.project_dir = Path(project_dir)
        self.renderer = renderer or TemplateRenderer()

    async def generate(self, answers: ProjectAnswers) -> StepResult:
        """Write every per-model file for *answers*."""
        result = StepResult(name=self.step_name)
        scheduled = model_templates_for(answers)

        for ctx in answers.contexts():
            for spec in scheduled:
                for diagnostic in check_naming_contract(spec, ctx, scheduled):
                    print_warning(f"Warning: {diagnostic}")
                    result.diagnostics.append(diagnostic)
                path = await self.render_model_file(spec, ctx)
                result.written.append(path)
                result.messages.append(f"{spec.filename(ctx)} created successfully.")

        if AUTHORIZATION_MIDDLEWARE.predicate(answers):
            path = await self.renderer.render_to_file(
                AUTHORIZATION_MIDDLEWARE.template,
                self.project_dir / AUTHORIZATION_MIDDLEWARE.path,
                {},
            )
            print_success(f"{path.name} created successfully.")
            result.written.append(path)
            result.messages.append(f"{path.name} created successfully.")

        return result

    async def render_model_file(self, spec: ModelTemplate, ctx: TemplateContext) -> Path:
        """Render one per-model template and write it into its folder."""
        path = await self.renderer.render_to_file(
            spec.template,
            self.project_dir / spec.folder / spec.filename(ctx),
            ctx.model_dump(),
        )
        print_success(f"{path.name} created successfully.")
        return path
