"""
Tests for logging configuration helpers.
"""

import logging
import os
import tempfile
import unittest
from logging.handlers import TimedRotatingFileHandler

from lib.logging_utils import configureLogger, getLogLevelByStr, initLogging, quietLoggers


class TestGetLogLevelByStr(unittest.TestCase):
    """Test log level name resolution."""

    def testKnownLevels(self):
        """Test level names are case insensitive."""
        self.assertEqual(getLogLevelByStr("debug"), logging.DEBUG)
        self.assertEqual(getLogLevelByStr("WARNING"), logging.WARNING)

    def testUnknownLevel(self):
        """Test unknown names return the default."""
        self.assertIsNone(getLogLevelByStr("verbose"))
        self.assertEqual(getLogLevelByStr("verbose", logging.INFO), logging.INFO)

    def testNonLevelAttribute(self):
        """Test logging module attributes which are not levels are rejected."""
        self.assertIsNone(getLogLevelByStr("getLogger"))


class TestConfigureLogger(unittest.TestCase):
    """Test configuring individual loggers."""

    def setUp(self):
        """Set up test fixtures."""
        self.logger = logging.getLogger("markdown_forms.test")
        self.tempDir = tempfile.TemporaryDirectory()

    def tearDown(self):
        """Remove handlers and temporary files."""
        for handler in self.logger.handlers[:]:
            handler.close()
            self.logger.removeHandler(handler)
        self.logger.setLevel(logging.NOTSET)
        self.logger.propagate = True
        self.tempDir.cleanup()

    def testLevelAndPropagate(self):
        """Test level and propagate settings."""
        configureLogger(self.logger, {"level": "ERROR", "propagate": False})
        self.assertEqual(self.logger.level, logging.ERROR)
        self.assertFalse(self.logger.propagate)

    def testConsoleHandler(self):
        """Test console handler with its own level."""
        configureLogger(self.logger, {"level": "DEBUG", "console": True, "console-level": "ERROR"})
        self.assertEqual(len(self.logger.handlers), 1)
        self.assertEqual(self.logger.handlers[0].level, logging.ERROR)

    def testHandlersReplaced(self):
        """Test reconfiguring a logger does not duplicate handlers."""
        configureLogger(self.logger, {"console": True})
        configureLogger(self.logger, {"console": True})
        self.assertEqual(len(self.logger.handlers), 1)

    def testFileHandler(self):
        """Test file handler creates missing directories."""
        logFile = os.path.join(self.tempDir.name, "logs", "forms.log")
        configureLogger(self.logger, {"level": "INFO", "file": logFile})

        self.logger.info("rendered")
        for handler in self.logger.handlers:
            handler.flush()

        with open(logFile, "rt", encoding="utf-8") as f:
            self.assertIn("rendered", f.read())

    def testRotatingFileHandler(self):
        """Test rotate switches to a timed rotating handler."""
        logFile = os.path.join(self.tempDir.name, "forms.log")
        configureLogger(self.logger, {"file": logFile, "rotate": True})
        self.assertIsInstance(self.logger.handlers[0], TimedRotatingFileHandler)


class TestInitLogging(unittest.TestCase):
    """Test root logging setup."""

    def setUp(self):
        """Remember root logger state."""
        self.rootLogger = logging.getLogger()
        self.savedLevel = self.rootLogger.level
        self.savedHandlers = self.rootLogger.handlers[:]

    def tearDown(self):
        """Restore root logger state."""
        self.rootLogger.handlers = self.savedHandlers
        self.rootLogger.setLevel(self.savedLevel)
        logging.getLogger("lib.markdown_forms").setLevel(logging.NOTSET)
        logging.getLogger("mistune").setLevel(logging.NOTSET)

    def testRootAndNamedLoggers(self):
        """Test root level and per-logger sections."""
        initLogging({"level": "DEBUG", "logger": {"lib.markdown_forms": {"level": "ERROR"}}})

        self.assertEqual(self.rootLogger.level, logging.DEBUG)
        self.assertEqual(logging.getLogger("lib.markdown_forms").level, logging.ERROR)
        self.assertEqual(logging.getLogger("mistune").level, logging.WARNING)

    def testQuietLoggersKeptAtRootLevel(self):
        """Test third-party loggers are untouched when root is not verbose."""
        quietLoggers(["mistune"], logging.ERROR)
        self.assertEqual(logging.getLogger("mistune").level, logging.NOTSET)


if __name__ == "__main__":
    unittest.main()
