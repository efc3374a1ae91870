"""
Shared test fixtures and configuration for pytest
"""
import io
import os
import tempfile

# Keep config and log files out of the real home directory; must happen
# before anything under linecli is imported.
os.environ["LINECLI_HOME"] = tempfile.mkdtemp(prefix="linecli-tests-")

import pytest

from linecli.cli.manager import CliManager
from linecli.utils.config_manager import ConfigManager

from .test_helpers import RecordingHandler


@pytest.fixture(autouse=True)
def reset_config_manager():
    """Drop the ConfigManager singleton around each test"""
    ConfigManager.reset()
    yield
    ConfigManager.reset()


@pytest.fixture
def config_path(tmp_path):
    """Path for a throwaway configuration file"""
    return tmp_path / "config.json"


@pytest.fixture
def run_session():
    """Run a manager over the given input and return everything it wrote.

    Usage: output = run_session(["help\\n", "exit\\n"], handler1, handler2)
    """
    def _run(lines, *handlers, prompt="> "):
        reader = io.StringIO("".join(lines))
        writer = io.StringIO()
        manager = CliManager(reader, writer, prompt=prompt)
        for handler in handlers:
            manager.add_handler(handler)
        manager.start()
        return writer.getvalue()

    return _run


@pytest.fixture
def recording_handler():
    """Handler that records every call it receives"""
    return RecordingHandler({"start", "stop", "is-running"})
