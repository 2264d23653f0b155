from pathlib import Path
from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


def _template_literal(text: str) -> str:
    """Escape text for a JavaScript template literal (backslashes, backticks, `${`)."""
    return text.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def _interpolation(name: str) -> str:
    """`FeedFragmentDoc` -> `${FeedFragmentDoc}`"""
    return "${" + name + "}"


env = Environment(
    loader=FileSystemLoader(Path(__file__).parent),
    autoescape=select_autoescape(disabled_extensions=("jinja",)),
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)

env.filters["template_literal"] = _template_literal
env.filters["interpolation"] = _interpolation


def render(template_name: str, **context) -> str:
    """Render a template without its surrounding blank lines."""
    return env.get_template(template_name).render(**context).strip("\n")
