"""Read-only access to a Berth workspace on disk.

A workspace is the directory (``infra/`` by default) holding one
sub-directory per service. Each service may carry an ``addons/`` directory
with user-authored template fragments.
"""
from pathlib import Path
from typing import List, Optional

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from berth.core.config import get_config
from berth.core.logger import get_logger

logger = get_logger(__name__)

SUMMARY_FILE = ".workspace"


class WorkspaceNotFoundError(Exception):
    """Raised when no workspace directory can be located."""
    pass


class WorkspaceSummaryError(Exception):
    """Raised when the workspace summary file is malformed."""
    pass


class WorkspaceSummary(BaseModel):
    """Contents of the workspace summary file."""

    model_config = ConfigDict(extra='forbid')

    application: str

    @field_validator('application')
    @classmethod
    def validate_application(cls, v):
        """Application name must not be blank."""
        if not v.strip():
            raise ValueError("application name cannot be empty")
        return v.strip()


class Workspace:
    """Reads services and addon files from a workspace directory."""

    def __init__(self, root: Path, addons_dir: Optional[str] = None):
        """Initialize workspace.

        Args:
            root: Path to the workspace directory (e.g. ./infra)
            addons_dir: Name of per-service addons directory. Defaults to config value.
        """
        self.root = Path(root)
        self.addons_dir_name = addons_dir or get_config().addons_dir

    @classmethod
    def discover(cls, start: Optional[Path] = None, max_depth: Optional[int] = None) -> "Workspace":
        """Find the workspace by walking up from ``start``.

        Args:
            start: Directory to begin the search (defaults to cwd)
            max_depth: Number of parent directories to check after ``start``

        Returns:
            Workspace rooted at the first matching directory

        Raises:
            WorkspaceNotFoundError: If no workspace directory is found
        """
        config = get_config()
        current = Path(start or Path.cwd()).resolve()
        depth = config.search_depth if max_depth is None else max_depth

        for candidate in [current, *current.parents][:depth + 1]:
            ws_dir = candidate / config.workspace_dir
            if ws_dir.is_dir():
                logger.debug(f"Found workspace at {ws_dir}")
                return cls(ws_dir)

        raise WorkspaceNotFoundError(
            f"couldn't find a '{config.workspace_dir}' workspace directory "
            f"from {current} or up to {depth} parent directories"
        )

    def summary(self) -> WorkspaceSummary:
        """Load the workspace summary file.

        Raises:
            WorkspaceNotFoundError: If the summary file is missing
            WorkspaceSummaryError: If the file is not a valid summary
        """
        summary_path = self.root / SUMMARY_FILE
        if not summary_path.exists():
            raise WorkspaceNotFoundError(
                f"workspace summary {summary_path} not found"
            )

        with open(summary_path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise WorkspaceSummaryError(f"parse {summary_path}: {e}") from e

        if not isinstance(data, dict):
            raise WorkspaceSummaryError(f"{summary_path} must contain a mapping")

        try:
            return WorkspaceSummary(**data)
        except ValidationError as e:
            raise WorkspaceSummaryError(f"invalid {summary_path}: {e}") from e

    def list_services(self) -> List[str]:
        """List service directories in the workspace, sorted by name."""
        if not self.root.is_dir():
            return []
        return sorted(
            p.name for p in self.root.iterdir()
            if p.is_dir() and not p.name.startswith(".")
        )

    def addons_dir(self, svc_name: str) -> Path:
        """Path of the addons directory for a service."""
        return self.root / svc_name / self.addons_dir_name

    def read_addons_dir(self, svc_name: str) -> List[str]:
        """List file names in a service's addons directory.

        Names are sorted lexicographically so repeated listings are stable.
        Sub-directories are skipped.

        Raises:
            FileNotFoundError: If the addons directory doesn't exist
            NotADirectoryError: If the addons path is a file
        """
        addons_path = self.addons_dir(svc_name)
        return sorted(p.name for p in addons_path.iterdir() if p.is_file())

    def read_addons_file(self, svc_name: str, file_name: str) -> bytes:
        """Read the raw bytes of one addon file.

        Raises:
            OSError: If the file can't be read
        """
        return (self.addons_dir(svc_name) / file_name).read_bytes()
