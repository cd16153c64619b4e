"""express-scaffold -- interactive Express + Mongoose project scaffolder.

Asks a few questions about the project (authorization, validation, models)
and generates the folder skeleton, per-model boilerplate, shared utilities
and ``index.js``, installing the npm packages the generated code needs.
"""

__version__ = "0.1.0"
