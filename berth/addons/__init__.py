"""
Service addons composition.

Merges user-authored parameters, resources and outputs fragments from a
service's addons directory into a single deployable template.
"""

from .addons import STACK_NAME, Addons
from .aggregator import AggregatedAddons, aggregate
from .classifier import AddonFile, Category, MergeStrategy, classify, classify_files, filter_yaml_files
from .errors import AddonsDirNotFoundError, AddonsError, AddonsFileReadError, MissingAddonsFilesError
from .renderer import ADDONS_TEMPLATE_PATH, RenderMode, TemplateRenderer, render_addons
from .validator import validate_no_missing_files

__all__ = [
    "Addons",
    "STACK_NAME",
    "AddonFile",
    "AggregatedAddons",
    "Category",
    "MergeStrategy",
    "RenderMode",
    "TemplateRenderer",
    "ADDONS_TEMPLATE_PATH",
    "AddonsError",
    "AddonsDirNotFoundError",
    "AddonsFileReadError",
    "MissingAddonsFilesError",
    "aggregate",
    "classify",
    "classify_files",
    "filter_yaml_files",
    "render_addons",
    "validate_no_missing_files",
]
