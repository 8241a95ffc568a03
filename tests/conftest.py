"""Shared test configuration and fixtures for all tests."""

import logging
import stat
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from httpstat_batch.batch.models import ProbeResult
from httpstat_batch.shared.logging import LoggingManager
from .test_const import ENDPOINTS_FILE_CONTENT, FAILING_TOOL, SUCCEEDING_TOOL


def write_tool(bin_dir: Path, script: str, name: str = "httpstat") -> Path:
    """Write an executable fake probe tool into bin_dir."""
    bin_dir.mkdir(parents=True, exist_ok=True)
    tool = bin_dir / name
    tool.write_text(script)
    tool.chmod(tool.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return tool


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test inside an empty directory with plain console output."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HTTPSTAT_BATCH_USE_COLOR", "false")
    return tmp_path


@pytest.fixture
def succeeding_tool(workdir, monkeypatch):
    """Put a probe tool that always succeeds (and appends a record) first on PATH."""
    bin_dir = workdir / "bin"
    write_tool(bin_dir, SUCCEEDING_TOOL)
    monkeypatch.setenv("PATH", str(bin_dir))
    return bin_dir


@pytest.fixture
def failing_tool(workdir, monkeypatch):
    """Put a probe tool that always exits 1 first on PATH."""
    bin_dir = workdir / "bin"
    write_tool(bin_dir, FAILING_TOOL)
    monkeypatch.setenv("PATH", str(bin_dir))
    return bin_dir


@pytest.fixture
def endpoints_file(workdir):
    """Endpoints file with three URLs, comments and blank lines."""
    path = workdir / "endpoints_list.txt"
    path.write_text(ENDPOINTS_FILE_CONTENT)
    return path


class FakeInvokerBuilder:
    """Builder for probe invokers that return scripted outcomes."""

    def __init__(self):
        self.failures = set()

    def failing_on(self, endpoint: str, iteration: int):
        self.failures.add((endpoint, iteration))
        return self

    def build(self):
        invoker = MagicMock()

        def probe(endpoint, iteration):
            success = (endpoint, iteration) not in self.failures
            return ProbeResult(endpoint, iteration, success=success, return_code=0 if success else 1)

        invoker.probe.side_effect = probe
        return invoker


@pytest.fixture
def fake_invoker_builder():
    """Builder fixture for creating fake probe invokers."""
    return FakeInvokerBuilder()


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the console handler installed by a CLI run after each test."""
    yield
    if LoggingManager._handler is not None:
        logging.getLogger().removeHandler(LoggingManager._handler)
        LoggingManager._handler = None
