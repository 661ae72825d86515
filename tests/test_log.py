"""Logger configuration tests.

Run: python -m pytest tests/test_log.py -v
"""

import logging
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from bigo._log import configure, log


class TestConfigure:

    def setup_method(self):
        self._level = log.level
        self._handlers = list(log.handlers)

    def teardown_method(self):
        log.setLevel(self._level)
        log.handlers[:] = self._handlers

    def test_alias(self):
        assert configure("1")
        assert log.level == logging.DEBUG

    def test_level_name(self):
        assert configure(" info ")
        assert log.level == logging.INFO

    def test_unknown(self):
        assert not configure("loud")

    def test_single_stream_handler(self):
        configure("DEBUG")
        configure("WARNING")
        streams = [h for h in log.handlers if isinstance(h, logging.StreamHandler)]
        assert len(streams) == 1
