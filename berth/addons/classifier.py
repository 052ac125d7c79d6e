"""Sort addon file names into template sections."""
from enum import Enum
from typing import Iterable, List, NamedTuple, Tuple

YAML_EXTENSIONS = (".yaml", ".yml")

PARAMS_FILE_WITHOUT_EXT = "params"
OUTPUTS_FILE_WITHOUT_EXT = "outputs"


class MergeStrategy(Enum):
    """How repeated content for a category is folded together."""
    REPLACE = "replace"
    APPEND = "append"


class Category(Enum):
    """Template section an addon file contributes to."""
    PARAMETERS = "parameters"
    OUTPUTS = "outputs"
    RESOURCES = "resources"

    @property
    def strategy(self) -> MergeStrategy:
        if self is Category.RESOURCES:
            return MergeStrategy.APPEND
        return MergeStrategy.REPLACE

    @property
    def requirement(self) -> str:
        """Name of the file users must add when this section is missing."""
        if self is Category.PARAMETERS:
            return f"{PARAMS_FILE_WITHOUT_EXT}.yaml"
        if self is Category.OUTPUTS:
            return f"{OUTPUTS_FILE_WITHOUT_EXT}.yaml"
        return 'at least one resource YAML file such as "s3-bucket.yaml"'


class AddonFile(NamedTuple):
    """A YAML file found in an addons directory and its section."""
    name: str
    category: Category


def split_ext(name: str) -> Tuple[str, str]:
    """Split a file name at its last dot.

    Unlike os.path.splitext, a leading dot counts as an extension so
    ".yaml" splits into ("", ".yaml").
    """
    index = name.rfind(".")
    if index == -1:
        return name, ""
    return name[:index], name[index:]


def is_yaml_file(name: str) -> bool:
    """True if the file extension is exactly .yaml or .yml."""
    return split_ext(name)[1] in YAML_EXTENSIONS


def filter_yaml_files(names: Iterable[str]) -> List[str]:
    """Keep YAML files, preserving their order."""
    return [name for name in names if is_yaml_file(name)]


def classify(name: str) -> Category:
    """Map a YAML file name to the section it fills.

    ``params.*`` fills Parameters, ``outputs.*`` fills Outputs and every other
    file is a Resources fragment. Matching is exact and case-sensitive.
    """
    base, _ = split_ext(name)
    if base == PARAMS_FILE_WITHOUT_EXT:
        return Category.PARAMETERS
    if base == OUTPUTS_FILE_WITHOUT_EXT:
        return Category.OUTPUTS
    return Category.RESOURCES


def classify_files(names: Iterable[str]) -> List[AddonFile]:
    """Classify the YAML files in a directory listing, in listing order."""
    return [AddonFile(name, classify(name)) for name in filter_yaml_files(names)]
