"""Fold addon file contents into per-section blocks."""
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from berth.addons.classifier import Category, MergeStrategy, classify_files
from berth.addons.errors import AddonsFileReadError
from berth.core.logger import get_logger

logger = get_logger(__name__)


@dataclass
class AggregatedAddons:
    """Merged text for each template section.

    ``parameters`` and ``outputs`` hold the last file folded into them.
    ``resources`` holds every resource file in fold order, each followed by
    a newline. ``blocks`` keeps the same content one entry per source file.
    """
    parameters: str = ""
    outputs: str = ""
    resources: str = ""
    blocks: Dict[Category, List[str]] = field(
        default_factory=lambda: {category: [] for category in Category}
    )

    def fold(self, category: Category, content: str) -> None:
        """Merge one file's content into its section."""
        trimmed = content.strip()
        attr = category.value

        if category.strategy is MergeStrategy.REPLACE:
            setattr(self, attr, trimmed)
            self.blocks[category] = [trimmed]
        else:
            setattr(self, attr, getattr(self, attr) + trimmed + "\n")
            self.blocks[category].append(trimmed)

    def get(self, category: Category) -> str:
        return getattr(self, category.value)


def aggregate(ws, svc_name: str, file_names: Iterable[str]) -> AggregatedAddons:
    """Read and merge the YAML files of a service's addons directory.

    Args:
        ws: Workspace reader exposing ``read_addons_file(svc_name, file_name)``
        svc_name: Service owning the addons directory
        file_names: Directory listing, in the order files should be folded

    Returns:
        AggregatedAddons for the listing

    Raises:
        AddonsFileReadError: On the first file that can't be read or isn't UTF-8
    """
    aggregated = AggregatedAddons()

    for addon in classify_files(file_names):
        try:
            content = ws.read_addons_file(svc_name, addon.name)
            if isinstance(content, bytes):
                content = content.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise AddonsFileReadError(svc_name, addon.name, e) from e

        logger.debug(f"Folding {addon.name} into {addon.category.value} for {svc_name}")
        aggregated.fold(addon.category, content)

    return aggregated
