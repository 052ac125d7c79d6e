"""Errors raised while composing a service's addons template."""
from typing import List


class AddonsError(Exception):
    """Base class for addons composition failures."""
    pass


class AddonsDirNotFoundError(AddonsError):
    """Raised when a service has no readable addons directory."""

    def __init__(self, svc_name: str, parent_err: Exception):
        self.svc_name = svc_name
        self.parent_err = parent_err
        super().__init__(f"couldn't find an addons directory for service {svc_name}")


class AddonsFileReadError(AddonsError):
    """Raised when a single addon file can't be read."""

    def __init__(self, svc_name: str, file_name: str, parent_err: Exception):
        self.svc_name = svc_name
        self.file_name = file_name
        self.parent_err = parent_err
        super().__init__(
            f"read addons file {file_name} under service {svc_name}: {parent_err}"
        )


class MissingAddonsFilesError(AddonsError):
    """Raised when the addons directory lacks a required section."""

    def __init__(self, missing: List[str]):
        self.missing = list(missing)
        super().__init__(
            f"addons directory has missing file(s): {', '.join(self.missing)}"
        )
