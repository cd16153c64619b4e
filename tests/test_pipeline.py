"""Tests for the pipeline orchestrator and CLI (express_scaffold.pipeline).

Covers:
- All steps run and are awaited before the result is returned
- Skipped installation
- A failing step does not stop its siblings
- CLI flags, exit codes and cancellation
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from express_scaffold.config import Config
from express_scaffold.exceptions import CommandError
from express_scaffold.models import GenerationResult, ProjectAnswers, StepResult
from express_scaffold.pipeline import INSTALL_STEP, OUTPUT_STEP, Pipeline, main

pytestmark = pytest.mark.unit

GENERATION_STEPS = ["folders", "initial files", "model files", "utilities", "entry point"]


class TestPipelineRun:
    @pytest.mark.asyncio
    async def test_skip_install_generates_everything(self, project_dir: Path, full_answers):
        result = await Pipeline(Config(output_dir=project_dir, skip_install=True)).run(full_answers)

        assert result.success
        assert [s.name for s in result.steps] == [INSTALL_STEP, *GENERATION_STEPS]
        assert result.step(INSTALL_STEP).skipped
        assert (project_dir / "index.js").is_file()
        assert (project_dir / "validations" / "productValidations.js").is_file()
        assert (project_dir / "middlewares" / "authorizationMiddlewares.js").is_file()

    @pytest.mark.asyncio
    async def test_creates_missing_output_dir(self, tmp_path: Path, plain_answers):
        target = tmp_path / "new" / "app"
        result = await Pipeline(Config(output_dir=target, skip_install=True)).run(plain_answers)
        assert result.success
        assert (target / "routes" / "userRoutes.js").is_file()

    @pytest.mark.asyncio
    async def test_unusable_output_dir_fails_cleanly(self, tmp_path: Path, plain_answers):
        blocker = tmp_path / "afile"
        blocker.write_text("not a directory")
        pipeline = Pipeline(Config(output_dir=blocker / "sub"))
        with patch.object(pipeline.installer, "install", AsyncMock()) as install:
            result = await pipeline.run(plain_answers)

        assert not result.success
        assert [s.name for s in result.steps] == [OUTPUT_STEP]
        assert result.step(OUTPUT_STEP).error
        install.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_installer_runs_with_answers(self, project_dir: Path, plain_answers):
        pipeline = Pipeline(Config(output_dir=project_dir))
        with patch.object(pipeline.installer, "install", AsyncMock(return_value=["ok", ""])) as install:
            result = await pipeline.run(plain_answers)

        install.assert_awaited_once_with(plain_answers)
        assert result.success
        assert result.step(INSTALL_STEP).messages == ["ok"]

    @pytest.mark.asyncio
    async def test_install_failure_does_not_stop_generation(self, project_dir: Path, plain_answers):
        pipeline = Pipeline(Config(output_dir=project_dir))
        failure = CommandError("npm i express", 1, "", "npm ERR! network")
        with patch.object(pipeline.installer, "install", AsyncMock(side_effect=failure)):
            result = await pipeline.run(plain_answers)

        assert not result.success
        assert [s.name for s in result.failed_steps] == [INSTALL_STEP]
        assert result.step(INSTALL_STEP).error == "Error executing command: npm ERR! network"
        assert all(result.step(name).success for name in GENERATION_STEPS)
        assert (project_dir / "index.js").is_file()

    @pytest.mark.asyncio
    async def test_generation_failure_isolated(self, project_dir: Path, plain_answers):
        pipeline = Pipeline(Config(output_dir=project_dir, skip_install=True))
        with patch.object(
            pipeline.utilities, "build", AsyncMock(side_effect=PermissionError("read-only"))
        ):
            result = await pipeline.run(plain_answers)

        assert [s.name for s in result.failed_steps] == ["utilities"]
        assert result.step("utilities").error == "read-only"
        assert result.step("model files").success
        assert (project_dir / "models" / "user.js").is_file()

    @pytest.mark.asyncio
    async def test_diagnostics_surface_in_result(self, project_dir: Path, plain_answers):
        result = await Pipeline(Config(output_dir=project_dir, skip_install=True)).run(plain_answers)
        assert result.success
        assert result.diagnostics == [
            "routes/userRoutes.js requires validations/userValidations.js, which is not generated"
        ]


class TestMain:
    @pytest.fixture(autouse=True)
    def _clear_env(self, monkeypatch):
        for name in (
            "SCAFFOLD_OUTPUT_DIR",
            "SCAFFOLD_PACKAGE_MANAGER",
            "SCAFFOLD_INSTALL_TIMEOUT",
            "SCAFFOLD_SKIP_INSTALL",
        ):
            monkeypatch.delenv(name, raising=False)

    def test_success_exits_normally(self, project_dir: Path):
        answers = ProjectAnswers(models=("user",))
        with patch("express_scaffold.pipeline.collect_answers", return_value=answers):
            main(["--output", str(project_dir), "--skip-install"])
        assert (project_dir / "index.js").is_file()

    def test_failure_exits_with_one(self, project_dir: Path):
        failed = GenerationResult(steps=[StepResult(name="folders", success=False, error="x")])
        with patch("express_scaffold.pipeline.collect_answers", return_value=ProjectAnswers()), \
                patch.object(Pipeline, "run", AsyncMock(return_value=failed)):
            with pytest.raises(SystemExit) as exc_info:
                main(["-o", str(project_dir)])
        assert exc_info.value.code == 1

    def test_unusable_output_dir_exits_with_one(self, tmp_path: Path):
        blocker = tmp_path / "afile"
        blocker.write_text("not a directory")
        with patch("express_scaffold.pipeline.collect_answers", return_value=ProjectAnswers()):
            with pytest.raises(SystemExit) as exc_info:
                main(["-o", str(blocker / "sub"), "--skip-install"])
        assert exc_info.value.code == 1
        assert blocker.read_text() == "not a directory"

    def test_cancellation_exits_with_130(self, project_dir: Path):
        with patch("express_scaffold.pipeline.collect_answers", side_effect=KeyboardInterrupt):
            with pytest.raises(SystemExit) as exc_info:
                main(["-o", str(project_dir)])
        assert exc_info.value.code == 130
        assert list(project_dir.iterdir()) == []

    def test_flags_reach_config(self, project_dir: Path):
        captured: dict[str, Config] = {}

        def fake_init(self, config):
            captured["config"] = config

        ok = GenerationResult(steps=[])
        with patch("express_scaffold.pipeline.collect_answers", return_value=ProjectAnswers()), \
                patch.object(Pipeline, "__init__", fake_init), \
                patch.object(Pipeline, "run", AsyncMock(return_value=ok)):
            main(["-o", str(project_dir), "--skip-install", "--package-manager", "pnpm"])

        config = captured["config"]
        assert config.output_dir == project_dir
        assert config.skip_install is True
        assert config.package_manager == "pnpm"
