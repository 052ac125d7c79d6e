"""Berth runtime configuration and settings."""
import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class BerthConfig:
    """Runtime configuration for Berth commands.

    Attributes:
        workspace_dir: Name of the workspace directory in a project (default: infra)
        addons_dir: Name of the addons directory inside a service (default: addons)
        search_depth: Parent directories searched for the workspace (default: 5)
        render_mode: How addon blocks reach the template, "lines" or "blocks"
    """

    workspace_dir: str = "infra"
    addons_dir: str = "addons"
    search_depth: int = 5
    render_mode: str = "lines"

    @classmethod
    def from_env(cls) -> "BerthConfig":
        """Create config from environment variables.

        Environment variables:
            BERTH_WORKSPACE_DIR: Workspace directory name
            BERTH_ADDONS_DIR: Addons directory name under each service
            BERTH_SEARCH_DEPTH: Number of parent directories to search
            BERTH_RENDER_MODE: "lines" or "blocks"

        Returns:
            BerthConfig instance with values from environment or defaults
        """
        return cls(
            workspace_dir=os.getenv("BERTH_WORKSPACE_DIR", cls.workspace_dir),
            addons_dir=os.getenv("BERTH_ADDONS_DIR", cls.addons_dir),
            search_depth=int(os.getenv("BERTH_SEARCH_DEPTH", cls.search_depth)),
            render_mode=os.getenv("BERTH_RENDER_MODE", cls.render_mode),
        )


# Global config instance (can be overridden)
_config: Optional[BerthConfig] = None


def get_config() -> BerthConfig:
    """Get the global Berth configuration.

    Returns:
        BerthConfig instance (creates from environment if not set)
    """
    global _config
    if _config is None:
        _config = BerthConfig.from_env()
    return _config


def set_config(config: Optional[BerthConfig]):
    """Set the global Berth configuration.

    Args:
        config: BerthConfig instance to use globally, or None to reload from env
    """
    global _config
    _config = config
