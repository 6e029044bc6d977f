"""Application configuration.

One frozen ``AppConfig`` per app. The name separator is read once, when
the app builds its root router, so nested names stay consistent.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, name_separator=":")
    """

    debug: bool = False

    # Routing
    name_separator: str = "."  # Joins a nest name to inner route names

    # Templates (requires the ``templates`` extra)
    template_dir: str | Path = "templates"
    autoescape: bool = True
