import os
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, TemplateError

from .errors import BuildError
from .posts import PostIndex


def load_template(template_path: Path):
    """Load a template file with autoescaping on, relative to its own directory."""
    template_path = Path(template_path)
    env = Environment(
        loader=FileSystemLoader(str(template_path.parent)),
        autoescape=True,
    )
    env.filters["basename"] = os.path.basename
    try:
        return env.get_template(template_path.name)
    except (TemplateError, UnicodeDecodeError, OSError) as e:
        raise BuildError(f"Error parsing template {template_path}: {e}") from e


def render_html(index: PostIndex, template_path: Path, output_path: Path):
    """Render the whole index into output_path."""
    template = load_template(template_path)
    try:
        html = template.render(posts=index.posts, index=index)
    except Exception as e:
        # template expressions can raise anything
        raise BuildError(f"Error executing template {template_path}: {e}") from e

    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding="utf-8")
    except OSError as e:
        raise BuildError(f"Error writing output HTML {output_path}: {e}") from e
