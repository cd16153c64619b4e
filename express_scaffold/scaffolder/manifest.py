"""What gets generated, as data.

Folders and templates are listed together with the predicate that decides
whether a given project gets them.  The builders only walk these lists, so
changing the generated layout never touches control flow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from ..models import ProjectAnswers, TemplateContext

Predicate = Callable[[ProjectAnswers], bool]


def always(answers: ProjectAnswers) -> bool:
    return True


def wants_validation(answers: ProjectAnswers) -> bool:
    return answers.wants_validation


def wants_authorization(answers: ProjectAnswers) -> bool:
    return answers.wants_authorization


@dataclass(frozen=True)
class FolderSpec:
    """A top-level folder of the generated project."""

    name: str
    predicate: Predicate = always


@dataclass(frozen=True)
class ModelTemplate:
    """A file rendered once per model.

    ``requires`` names the other template kinds the rendered file imports
    from, so the generator can check they are generated as well.
    """

    kind: str
    folder: str
    template: str
    suffix: str
    predicate: Predicate = always
    requires: tuple[str, ...] = field(default=())

    def filename(self, ctx: TemplateContext) -> str:
        return f"{ctx.lower}{self.suffix}.js"

    def relative_path(self, ctx: TemplateContext) -> str:
        return f"{self.folder}/{self.filename(ctx)}"


@dataclass(frozen=True)
class SharedFile:
    """A file rendered once per project."""

    path: str
    template: str
    predicate: Predicate = always


# ---------------------------------------------------------------------------
# Manifest
# ---------------------------------------------------------------------------

FOLDERS: tuple[FolderSpec, ...] = (
    FolderSpec("controllers"),
    FolderSpec("routes"),
    FolderSpec("models"),
    FolderSpec("utilities"),
    FolderSpec("middlewares"),
    FolderSpec("uploads"),
    FolderSpec("validations", wants_validation),
)

MODEL_TEMPLATES: tuple[ModelTemplate, ...] = (
    ModelTemplate("model", "models", "models/model.js.j2", ""),
    ModelTemplate(
        "controller", "controllers", "controllers/controller.js.j2", "Controllers",
        requires=("model",),
    ),
    ModelTemplate(
        "route", "routes", "routes/route.js.j2", "Routes",
        requires=("controller", "validation", "middleware"),
    ),
    ModelTemplate(
        "validation", "validations", "validations/validation.js.j2", "Validations",
        predicate=wants_validation,
        requires=("model",),
    ),
    ModelTemplate("middleware", "middlewares", "middlewares/middleware.js.j2", "Middlewares"),
)

AUTHORIZATION_MIDDLEWARE = SharedFile(
    "middlewares/authorizationMiddlewares.js",
    "middlewares/authorizationMiddlewares.js.j2",
    wants_authorization,
)

CONFIGURATIONS_FOLDER = "utilities/configurations"

UTILITY_FILES: tuple[SharedFile, ...] = (
    SharedFile("utilities/configurations/DBConfigurations.js", "utilities/DBConfigurations.js.j2"),
    SharedFile("utilities/configurations/multerConfigurations.js", "utilities/multerConfigurations.js.j2"),
    SharedFile("utilities/responseMessages.js", "utilities/responseMessages.js.j2"),
)

ENTRY_FILE = SharedFile("index.js", "index.js.j2")
ENV_FILE = SharedFile(".env", "env.j2")
GITIGNORE_FILE = SharedFile(".gitignore", "gitignore.j2")

# Appended to an existing .gitignore that does not mention it yet.
GITIGNORE_ENV_ENTRY = "./env"


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def folders_for(answers: ProjectAnswers) -> list[str]:
    """Names of the top-level folders *answers* calls for, in order."""
    return [spec.name for spec in FOLDERS if spec.predicate(answers)]


def model_templates_for(answers: ProjectAnswers) -> list[ModelTemplate]:
    """Per-model templates *answers* calls for, in order."""
    return [spec for spec in MODEL_TEMPLATES if spec.predicate(answers)]


def shared_files_for(
    answers: ProjectAnswers, files: tuple[SharedFile, ...]
) -> list[SharedFile]:
    return [spec for spec in files if spec.predicate(answers)]
