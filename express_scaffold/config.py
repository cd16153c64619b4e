"""express-scaffold configuration.

Typed configuration for a scaffolding run.  Settings use a Pydantic v2 model
so they are validated at construction time and can be built from environment
variables or overridden from the command line.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "y", "on"}


class Config(BaseModel):
    """Global scaffolder configuration.

    Created once by the CLI entry point and passed to the ``Pipeline``.
    """

    output_dir: Path = Field(default=Path("."), description="Directory the project is generated in")
    package_manager: str = Field(default="npm", min_length=1, description="Package manager executable")
    install_timeout: int = Field(
        default=300, ge=10, description="Per-command install timeout in seconds"
    )
    skip_install: bool = Field(default=False, description="Skip the dependency installation step")

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            SCAFFOLD_OUTPUT_DIR, SCAFFOLD_PACKAGE_MANAGER,
            SCAFFOLD_INSTALL_TIMEOUT, SCAFFOLD_SKIP_INSTALL.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SCAFFOLD_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["SCAFFOLD_OUTPUT_DIR"])
        if os.environ.get("SCAFFOLD_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["SCAFFOLD_PACKAGE_MANAGER"]
        if os.environ.get("SCAFFOLD_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["SCAFFOLD_INSTALL_TIMEOUT"])
        if os.environ.get("SCAFFOLD_SKIP_INSTALL"):
            kwargs["skip_install"] = os.environ["SCAFFOLD_SKIP_INSTALL"].strip().lower() in _TRUTHY
        return cls(**kwargs)
