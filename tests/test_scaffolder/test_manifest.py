"""Tests for the generation manifest (express_scaffold.scaffolder.manifest)."""

from __future__ import annotations

import pytest

from express_scaffold.models import ProjectAnswers, TemplateContext
from express_scaffold.scaffolder.manifest import (
    AUTHORIZATION_MIDDLEWARE,
    MODEL_TEMPLATES,
    UTILITY_FILES,
    folders_for,
    model_templates_for,
    shared_files_for,
)
from express_scaffold.scaffolder.templates import TemplateRenderer

pytestmark = pytest.mark.unit

BASE_FOLDERS = ["controllers", "routes", "models", "utilities", "middlewares", "uploads"]


class TestFolders:
    def test_without_validation(self):
        assert folders_for(ProjectAnswers()) == BASE_FOLDERS

    def test_with_validation(self):
        assert folders_for(ProjectAnswers(wants_validation=True)) == BASE_FOLDERS + ["validations"]

    def test_repeated_calls_do_not_accumulate(self):
        answers = ProjectAnswers(wants_validation=True)
        folders_for(answers)
        assert folders_for(answers).count("validations") == 1
        assert "validations" not in folders_for(ProjectAnswers())


class TestModelTemplates:
    def test_kinds_without_validation(self):
        kinds = [s.kind for s in model_templates_for(ProjectAnswers())]
        assert kinds == ["model", "controller", "route", "middleware"]

    def test_kinds_with_validation(self):
        kinds = [s.kind for s in model_templates_for(ProjectAnswers(wants_validation=True))]
        assert kinds == ["model", "controller", "route", "validation", "middleware"]

    def test_filenames_for_user(self):
        ctx = TemplateContext.for_model("user")
        assert {s.kind: s.relative_path(ctx) for s in MODEL_TEMPLATES} == {
            "model": "models/user.js",
            "controller": "controllers/userControllers.js",
            "route": "routes/userRoutes.js",
            "validation": "validations/userValidations.js",
            "middleware": "middlewares/userMiddlewares.js",
        }

    def test_route_requires_siblings(self):
        route = next(s for s in MODEL_TEMPLATES if s.kind == "route")
        assert set(route.requires) == {"controller", "validation", "middleware"}


class TestSharedFiles:
    def test_authorization_predicate(self):
        assert AUTHORIZATION_MIDDLEWARE.predicate(ProjectAnswers(wants_authorization=True))
        assert not AUTHORIZATION_MIDDLEWARE.predicate(ProjectAnswers())

    def test_utility_files_unconditional(self):
        assert len(shared_files_for(ProjectAnswers(), UTILITY_FILES)) == 3


class TestTemplatesExist:
    def test_every_manifest_template_is_packaged(self):
        available = set(TemplateRenderer().list_templates())
        referenced = {s.template for s in MODEL_TEMPLATES}
        referenced |= {s.template for s in UTILITY_FILES}
        referenced.add(AUTHORIZATION_MIDDLEWARE.template)
        assert referenced <= available
