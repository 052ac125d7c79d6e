"""Render aggregated addons into the nested stack template."""
from enum import Enum
from pathlib import Path
from typing import Any, Dict, List, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from berth.addons.aggregator import AggregatedAddons
from berth.addons.classifier import Category
from berth.core.logger import get_logger

logger = get_logger(__name__)

ADDONS_TEMPLATE_PATH = "addons/cf.yml"


class RenderMode(Enum):
    """How section content is handed to the template.

    LINES splits each section into one entry per line. BLOCKS keeps one entry
    per source file, which preserves multi-line fragments as a unit.
    """
    LINES = "lines"
    BLOCKS = "blocks"


class TemplateRenderer:
    """Renders templates shipped under berth/templates with Jinja2."""

    def __init__(self, templates_dir: Optional[Path] = None):
        """Initialize renderer.

        Args:
            templates_dir: Directory holding templates. Defaults to berth/templates/
        """
        if templates_dir is None:
            # Renderer is in berth/addons/, templates are in berth/templates/
            templates_dir = Path(__file__).parent.parent / "templates"
        self.templates_dir = Path(templates_dir)

        self.jinja_env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, path: str, data: Dict[str, Any]) -> str:
        """Render the template at ``path`` with ``data``.

        Raises:
            jinja2.TemplateError: If the template is missing or fails to render
        """
        template = self.jinja_env.get_template(path)
        return template.render(**data)


def split_lines(block: str) -> List[str]:
    """Trim a block and split it into lines."""
    return block.strip().split("\n")


def section_entries(aggregated: AggregatedAddons, category: Category, mode: RenderMode) -> List[str]:
    """Sequence of template entries for one section."""
    if mode is RenderMode.BLOCKS:
        return [block for block in aggregated.blocks[category] if block]
    return split_lines(aggregated.get(category))


def render_addons(
    renderer: TemplateRenderer,
    svc_name: str,
    aggregated: AggregatedAddons,
    mode: RenderMode = RenderMode.LINES,
) -> str:
    """Render the addons template for a service.

    Args:
        renderer: Render primitive
        svc_name: Service name exposed to the template
        aggregated: Validated section content
        mode: Line-per-entry (default) or block-per-entry

    Returns:
        Rendered template text, unmodified
    """
    context = {
        "svc_name": svc_name,
        "parameters": section_entries(aggregated, Category.PARAMETERS, mode),
        "resources": section_entries(aggregated, Category.RESOURCES, mode),
        "outputs": section_entries(aggregated, Category.OUTPUTS, mode),
    }
    logger.debug(
        f"Rendering {ADDONS_TEMPLATE_PATH} for {svc_name} "
        f"({len(context['resources'])} resource entries, mode={mode.value})"
    )
    return renderer.render(ADDONS_TEMPLATE_PATH, context)
