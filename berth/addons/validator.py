"""Completeness check for aggregated addons."""
from typing import List

from berth.addons.aggregator import AggregatedAddons
from berth.addons.classifier import Category
from berth.addons.errors import MissingAddonsFilesError

# Order in which missing sections are reported
REQUIRED_CATEGORIES = (Category.PARAMETERS, Category.OUTPUTS, Category.RESOURCES)


def missing_files(aggregated: AggregatedAddons) -> List[str]:
    """Requirements for every section that ended up empty."""
    return [
        category.requirement
        for category in REQUIRED_CATEGORIES
        if not aggregated.get(category).strip()
    ]


def validate_no_missing_files(aggregated: AggregatedAddons) -> None:
    """Ensure parameters, outputs and resources were all provided.

    Raises:
        MissingAddonsFilesError: Listing every missing section
    """
    missing = missing_files(aggregated)
    if missing:
        raise MissingAddonsFilesError(missing)
