import io

import pytest
from conftest import make_executable
from loguru import logger

from pylaunch.log import configure_logging
from pylaunch.resolver import find_executable
from pylaunch.version import MajorOnly


@pytest.fixture
def sink():
    stream = io.StringIO()
    yield stream
    logger.remove()
    logger.disable("pylaunch")


class TestConfigureLogging:
    def test_debug_records_resolution(self, bin_dir, sink):
        python = make_executable(bin_dir, "python3.8")
        configure_logging(True, sink=sink)

        find_executable(MajorOnly(3), [bin_dir])

        output = sink.getvalue()
        assert f"py: DEBUG: {python} matches '3' loosely" in output

    def test_skipped_directories_are_logged(self, tmp_path, sink):
        configure_logging(True, sink=sink)

        find_executable(MajorOnly(3), [tmp_path / "missing"])

        assert "skipping" in sink.getvalue()

    def test_silent_without_debug(self, bin_dir, sink):
        make_executable(bin_dir, "python3.8")
        logger.add(sink, format="{message}")
        configure_logging(False)

        find_executable(MajorOnly(3), [bin_dir])

        assert sink.getvalue() == ""
