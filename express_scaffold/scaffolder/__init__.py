"""express-scaffold generators -- render the Express project skeleton.

Each builder owns one top-level step and returns a ``StepResult``.

Quick usage::

    from express_scaffold.models import ProjectAnswers
    from express_scaffold.scaffolder import FileTemplater, FolderBuilder

    answers = ProjectAnswers(wants_validation=True, models=("user",))
    await FolderBuilder("/tmp/app").build(answers)
    await FileTemplater("/tmp/app").generate(answers)
"""

from express_scaffold.scaffolder.entry_gen import EntryPointComposer, InitialFilesBuilder
from express_scaffold.scaffolder.folders import FolderBuilder
from express_scaffold.scaffolder.generator import FileTemplater, check_naming_contract
from express_scaffold.scaffolder.templates import TemplateRenderer
from express_scaffold.scaffolder.utilities_gen import UtilitiesBuilder

__all__ = [
    "EntryPointComposer",
    "FileTemplater",
    "FolderBuilder",
    "InitialFilesBuilder",
    "TemplateRenderer",
    "UtilitiesBuilder",
    "check_naming_contract",
]
