"""Shared test fixtures for Berth tests."""
from typing import Dict, Optional, Union

import pytest

from berth.core.config import set_config
from berth.core.workspace import Workspace


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Each test starts from default configuration."""
    for var in ("BERTH_WORKSPACE_DIR", "BERTH_ADDONS_DIR", "BERTH_SEARCH_DEPTH",
                "BERTH_RENDER_MODE", "BERTH_WORKSPACE"):
        monkeypatch.delenv(var, raising=False)
    set_config(None)
    yield
    set_config(None)


@pytest.fixture(autouse=True)
def isolated_log_file(tmp_path, monkeypatch):
    """File logging writes under tmp_path and is set up afresh per test."""
    import logging

    from berth.core import logger as berth_logger

    log_file = tmp_path / "logs" / "berth.log"
    monkeypatch.setattr(berth_logger, "LOG_FILE", log_file)
    monkeypatch.setattr(berth_logger, "_file_logging_configured", False)
    yield log_file

    root_logger = logging.getLogger("berth")
    for handler in list(root_logger.handlers):
        if isinstance(handler, logging.FileHandler):
            root_logger.removeHandler(handler)
            handler.close()


@pytest.fixture
def make_workspace(tmp_path):
    """Build an infra/ workspace with one service and its addon files."""

    def _make(files: Optional[Dict[str, str]] = None, service: str = "api",
              application: str = "shop") -> Workspace:
        root = tmp_path / "infra"
        root.mkdir(exist_ok=True)
        (root / ".workspace").write_text(f"application: {application}\n")
        svc_dir = root / service
        svc_dir.mkdir(exist_ok=True)
        (svc_dir / "manifest.yml").write_text(f"name: {service}\n")
        if files is not None:
            addons = svc_dir / "addons"
            addons.mkdir(exist_ok=True)
            for name, content in files.items():
                (addons / name).write_text(content)
        return Workspace(root)

    return _make


# Common addon files
@pytest.fixture
def s3_addons():
    """Minimal complete addons directory with one S3 bucket."""
    return {
        "params.yaml": "Param1:\n  Type: String",
        "outputs.yaml": "Output1:\n  Value: foo",
        "s3-bucket.yaml": "Bucket:\n  Type: AWS::S3::Bucket",
    }


class FakeWorkspace:
    """In-memory workspace reader with a fixed listing order."""

    def __init__(self, files: Dict[str, Union[str, bytes]], listing: Optional[list] = None,
                 dir_error: Optional[Exception] = None):
        self.files = files
        self.listing = listing if listing is not None else list(files)
        self.dir_error = dir_error
        self.reads = []

    def read_addons_dir(self, svc_name: str):
        if self.dir_error:
            raise self.dir_error
        return list(self.listing)

    def read_addons_file(self, svc_name: str, file_name: str) -> bytes:
        self.reads.append(file_name)
        if file_name not in self.files:
            raise FileNotFoundError(f"no such file: {file_name}")
        content = self.files[file_name]
        return content if isinstance(content, bytes) else content.encode()


@pytest.fixture
def fake_ws():
    """Factory for in-memory workspace readers."""
    return FakeWorkspace
