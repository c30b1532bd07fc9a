"""
Logging utilities for the markdown forms renderer.

Logging is configured from the ``[logging]`` config section. The section
itself configures the root logger, ``[logging.logger.<name>]`` sub-tables
configure individual loggers with the same keys:

    level, format, propagate
    console, console-level
    file, file-level, rotate
"""
import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Dict, Any, Iterable, Optional

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Third-party loggers kept at WARNING unless configured explicitly
QUIET_LOGGERS = ("mistune",)


def getLogLevelByStr(levelStr: str, default: Optional[int] = None) -> Optional[int]:
    """Get log level by string."""
    logLevel = getattr(logging, str(levelStr).upper(), None)
    if not isinstance(logLevel, int):
        logger.error(f"Invalid log level '{levelStr}'")
        return default
    return logLevel


def _handlerLevel(config: Dict[str, Any], key: str, fallback: int) -> int:
    if key not in config:
        return fallback
    return getLogLevelByStr(config[key], fallback)


def _createFileHandler(logFile: str, rotate: bool) -> logging.Handler:
    Path(logFile).parent.mkdir(parents=True, exist_ok=True)
    if rotate:
        return TimedRotatingFileHandler(
            filename=logFile,
            when="midnight",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
    return logging.FileHandler(logFile, encoding="utf-8")


def configureLogger(localLogger: logging.Logger, config: Dict[str, Any]) -> None:
    """Configure individual logger from config file settings."""

    if "propagate" in config:
        localLogger.propagate = bool(config["propagate"])

    if "level" in config:
        logLevel = getLogLevelByStr(config["level"])
        if logLevel is not None:
            localLogger.setLevel(logLevel)

    effectiveLevel = localLogger.getEffectiveLevel()
    formatter = logging.Formatter(config.get("format", DEFAULT_LOG_FORMAT))

    # Reconfiguring must not duplicate output
    for handler in localLogger.handlers[:]:
        localLogger.removeHandler(handler)

    handlers = []
    if config.get("console", False):
        handlers.append((logging.StreamHandler(), _handlerLevel(config, "console-level", effectiveLevel), "console"))

    if "file" in config:
        logFile = config["file"]
        try:
            fileHandler = _createFileHandler(logFile, bool(config.get("rotate", False)))
        except OSError as e:
            logger.error(f"Failed to setup file logging for {localLogger.name}: {e}")
        else:
            handlers.append((fileHandler, _handlerLevel(config, "file-level", effectiveLevel), f"file: {logFile}"))

    for handler, handlerLevel, target in handlers:
        handler.setLevel(handlerLevel)
        handler.setFormatter(formatter)
        localLogger.addHandler(handler)
        logger.info(f"Logging {localLogger.name} to {target}, logLevel: {handlerLevel}")


def quietLoggers(names: Iterable[str], rootLevel: int) -> None:
    """Raise chatty third-party loggers to WARNING when the root logger is more verbose."""
    if rootLevel >= logging.WARNING:
        return
    for name in names:
        logging.getLogger(name).setLevel(logging.WARNING)


def initLogging(config: Dict[str, Any]) -> None:
    """Configure logging from config file settings."""
    rootLogger = logging.getLogger()
    rootLogger.setLevel(logging.WARNING)

    configureLogger(rootLogger, config)
    logLevel = rootLogger.getEffectiveLevel()
    quietLoggers(QUIET_LOGGERS, logLevel)

    for loggerName, loggerConfig in config.get("logger", {}).items():
        logger.debug(f"Configuring logger '{loggerName}' with config {loggerConfig}")
        configureLogger(logging.getLogger(loggerName), loggerConfig)

    logger.info(f"Logging configured: root level={logLevel}")
