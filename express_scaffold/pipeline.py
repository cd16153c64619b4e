"""express-scaffold pipeline orchestrator.

Collects the answers, then runs the scaffolding steps:

* dependencies  -- ``npm init`` and the package installs, one at a time.
* folders       -- the top-level folder skeleton.
* initial files -- ``.env`` and ``.gitignore``.
* model files   -- model/controller/route/validation/middleware per model.
* utilities     -- DB, upload and response-message helpers.
* entry point   -- ``index.js``.

Dependency installation runs concurrently with file generation.  Folders are
created before the other generation steps, which then run concurrently.
Every step is awaited; a failing step is reported and never stops the
others.

Usage::

    express-scaffold
    python -m express_scaffold --output ./my-api --skip-install
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Awaitable
from pathlib import Path

from rich.markup import escape
from rich.panel import Panel

from express_scaffold.config import Config
from express_scaffold.installer import DependencyInstaller
from express_scaffold.models import GenerationResult, ProjectAnswers, StepResult
from express_scaffold.prompts import collect_answers
from express_scaffold.scaffolder import (
    EntryPointComposer,
    FileTemplater,
    FolderBuilder,
    InitialFilesBuilder,
    TemplateRenderer,
    UtilitiesBuilder,
)
from express_scaffold.utils import (
    console,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)

INSTALL_STEP = "dependencies"
OUTPUT_STEP = "output directory"


class Pipeline:
    """Runs every scaffolding step for one set of answers.

    Attributes:
        config: Run configuration.
        project_dir: Directory the project is generated in.
    """

    def __init__(self, config: Config) -> None:
        self.config = config
        self.project_dir = Path(config.output_dir)
        renderer = TemplateRenderer()
        self.installer = DependencyInstaller(
            self.project_dir,
            package_manager=config.package_manager,
            timeout=config.install_timeout,
        )
        self.folder_builder = FolderBuilder(self.project_dir)
        self.initial_files = InitialFilesBuilder(self.project_dir, renderer)
        self.templater = FileTemplater(self.project_dir, renderer)
        self.utilities = UtilitiesBuilder(self.project_dir, renderer)
        self.entry_point = EntryPointComposer(self.project_dir, renderer)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def run(self, answers: ProjectAnswers) -> GenerationResult:
        """Scaffold the project described by *answers*.

        Returns once every step has finished, successfully or not.
        """
        prepared = await _run_step(OUTPUT_STEP, self._prepare_output())
        if not prepared.success:
            result = GenerationResult(steps=[prepared])
            self._print_summary(result)
            return result
        self._print_setup(answers)

        install_steps, generation_steps = await asyncio.gather(
            self._install(answers),
            self._generate(answers),
        )
        result = GenerationResult(steps=[*install_steps, *generation_steps])
        self._print_summary(result)
        return result

    # ------------------------------------------------------------------
    # Branches
    # ------------------------------------------------------------------

    async def _prepare_output(self) -> StepResult:
        await asyncio.to_thread(self.project_dir.mkdir, parents=True, exist_ok=True)
        return StepResult(name=OUTPUT_STEP)

    async def _install(self, answers: ProjectAnswers) -> list[StepResult]:
        if self.config.skip_install:
            return [StepResult(name=INSTALL_STEP, skipped=True)]
        return [await _run_step(INSTALL_STEP, self._install_dependencies(answers))]

    async def _install_dependencies(self, answers: ProjectAnswers) -> StepResult:
        outputs = await self.installer.install(answers)
        return StepResult(name=INSTALL_STEP, messages=[o for o in outputs if o])

    async def _generate(self, answers: ProjectAnswers) -> list[StepResult]:
        # Later steps write into these folders.
        folders = await _run_step(FolderBuilder.step_name, self.folder_builder.build(answers))
        rest = await asyncio.gather(
            _run_step(InitialFilesBuilder.step_name, self.initial_files.build(answers)),
            _run_step(FileTemplater.step_name, self.templater.generate(answers)),
            _run_step(UtilitiesBuilder.step_name, self.utilities.build(answers)),
            _run_step(EntryPointComposer.step_name, self.entry_point.build(answers)),
        )
        return [folders, *rest]

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def _print_setup(self, answers: ProjectAnswers) -> None:
        models = ", ".join(answers.models) if answers.models else "(none)"
        lines = [
            f"Authorization : {'yes' if answers.wants_authorization else 'no'}",
            f"Validation    : {'yes' if answers.wants_validation else 'no'}",
            f"Models        : {models}",
            f"Output        : {self.project_dir.resolve()}",
        ]
        console.print(
            Panel(escape("\n".join(lines)), title="[bold]Your project setup[/bold]", border_style="cyan"),
            highlight=False,
        )

    def _print_summary(self, result: GenerationResult) -> None:
        console.print()
        print_summary_table(
            {step.name: _describe(step) for step in result.steps},
            title="Scaffold Summary",
        )
        for diagnostic in result.diagnostics:
            print_warning(f"Warning: {diagnostic}")
        if result.success:
            print_success("Project scaffolded successfully!")
        else:
            failed = ", ".join(step.name for step in result.failed_steps)
            print_error(f"Scaffolding finished with failures: {failed}")


# ---------------------------------------------------------------------------
# Module-level helpers
# ---------------------------------------------------------------------------


async def _run_step(name: str, step: Awaitable[StepResult]) -> StepResult:
    """Await *step*, turning any exception into a failed ``StepResult``."""
    try:
        return await step
    except Exception as exc:
        print_error(f"Error during {name}: {exc}")
        return StepResult(name=name, success=False, error=str(exc))


def _describe(step: StepResult) -> str:
    if step.error:
        return f"{step.status}: {step.error}"
    if step.written:
        return f"{step.status} ({len(step.written)} written)"
    return step.status


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``express-scaffold`` and ``python -m express_scaffold``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="express-scaffold",
        description="Interactive Express + Mongoose project scaffolder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  express-scaffold\n"
            "  express-scaffold --output ./my-api\n"
            "  express-scaffold --skip-install --package-manager pnpm\n"
        ),
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Directory to generate the project in (default: current directory)",
    )
    parser.add_argument(
        "--skip-install",
        action="store_true",
        help="Do not run the package manager",
    )
    parser.add_argument(
        "--package-manager",
        default=None,
        help="Package manager executable (default: npm)",
    )
    args = parser.parse_args(argv)

    config = Config.from_env()
    if args.output:
        config.output_dir = Path(args.output)
    if args.skip_install:
        config.skip_install = True
    if args.package_manager:
        config.package_manager = args.package_manager

    try:
        answers = collect_answers()
    except (KeyboardInterrupt, EOFError):
        console.print()
        print_error("Cancelled.")
        sys.exit(130)

    result = asyncio.run(Pipeline(config).run(answers))
    if not result.success:
        sys.exit(1)


if __name__ == "__main__":
    main()
