"""Kida environment setup.

Creates a kida Environment from signpost's AppConfig and exposes
``url_for`` as a template global, resolved against the route table of
the request being rendered. Requires ``pip install signpost[templates]``.
"""

from kida import Environment, FileSystemLoader

from signpost.config import AppConfig
from signpost.context import url_for
from signpost.templating.returns import Template


def create_environment(config: AppConfig) -> Environment:
    """Create a kida Environment from app configuration.

    Called once during ``App._freeze()``.
    """
    env = Environment(
        loader=FileSystemLoader(str(config.template_dir)),
        autoescape=config.autoescape,
        auto_reload=config.debug,
    )
    env.add_global("url_for", url_for)
    return env


def render_template(env: Environment, tpl: Template) -> str:
    """Render a full template to string."""
    template = env.get_template(tpl.name)
    return template.render(tpl.context)
