"""
Logging utilities for drupal-testkit.

Logging is configured from a plain dict so the same settings can come from
environment variables (see `loggingConfigFromEnv`) or from test code.
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from drupal_testkit.env import getEnvOr, getEnvOrBool

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVEL_ENV = "DRUPAL_TEST_LOG_LEVEL"
LOG_FILE_ENV = "DRUPAL_TEST_LOG_FILE"
LOG_CONSOLE_ENV = "DRUPAL_TEST_LOG_CONSOLE"


def getLogLevelByStr(levelStr: str, default: Optional[int] = None) -> Optional[int]:
    """Get log level by string."""
    level = getattr(logging, levelStr.strip().upper(), None)
    if not isinstance(level, int):
        logger.error(f"Invalid log level '{levelStr}'")
        return default
    return level


def configureLogger(localLogger: logging.Logger, config: Dict[str, Any]) -> None:
    """Configure individual logger from config dict.

    Supported keys: `level`, `format`, `propagate`, `console`,
    `console-level`, `file`, `file-level` and `rotate`.
    """

    if "propagate" in config:
        localLogger.propagate = bool(config["propagate"])

    if "level" in config:
        logLevel = getLogLevelByStr(config["level"])
        if logLevel is not None:
            localLogger.setLevel(logLevel)

    logLevel = localLogger.getEffectiveLevel()
    formatter = logging.Formatter(config.get("format", DEFAULT_LOG_FORMAT))

    # Handlers from a previous call would duplicate every record
    for handler in localLogger.handlers[:]:
        localLogger.removeHandler(handler)
        handler.close()

    if config.get("console", False):
        consoleLogLevel = logLevel
        if "console-level" in config:
            consoleLogLevel = getLogLevelByStr(config["console-level"], logLevel) or logLevel
        consoleHandler = logging.StreamHandler()
        consoleHandler.setLevel(consoleLogLevel)
        consoleHandler.setFormatter(formatter)
        localLogger.addHandler(consoleHandler)
        logger.info(f"Logging {localLogger.name} to console, logLevel: {consoleLogLevel}")

    if "file" in config:
        logFile = config["file"]
        try:
            Path(logFile).parent.mkdir(parents=True, exist_ok=True)

            fileLogLevel = logLevel
            if "file-level" in config:
                fileLogLevel = getLogLevelByStr(config["file-level"], logLevel) or logLevel

            fileHandler: logging.Handler
            if config.get("rotate", False):
                fileHandler = TimedRotatingFileHandler(
                    filename=logFile,
                    when="midnight",
                    interval=1,
                    backupCount=7,
                    encoding="utf-8",
                )
            else:
                fileHandler = logging.FileHandler(logFile, encoding="utf-8")

            fileHandler.setLevel(fileLogLevel)
            fileHandler.setFormatter(formatter)
            localLogger.addHandler(fileHandler)
            logger.info(f"Logging {localLogger.name} to file: {logFile}, logLevel: {fileLogLevel}")
        except OSError as e:
            logger.error(f"Failed to setup file logging for {localLogger.name}: {e}")


def initLogging(config: Dict[str, Any]) -> None:
    """Configure the package logger (and optional per-logger overrides) from config."""
    packageLogger = logging.getLogger("drupal_testkit")
    configureLogger(packageLogger, config)
    logLevel = packageLogger.getEffectiveLevel()

    # httpx logs every request at INFO, we already log each retrieval ourselves
    if logLevel < logging.WARNING:
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)

    for loggerName, loggerConfig in config.get("logger", {}).items():
        logger.debug(f"Configuring logger '{loggerName}' with config {loggerConfig}")
        configureLogger(logging.getLogger(loggerName), loggerConfig)

    logger.info(f"Logging configured: drupal_testkit level={logging.getLevelName(logLevel)}")


def loggingConfigFromEnv() -> Optional[Dict[str, Any]]:
    """Build an `initLogging` config from DRUPAL_TEST_LOG_* variables.

    Returns None when none of the variables is set.
    """
    level = getEnvOr(LOG_LEVEL_ENV, "")
    logFile = getEnvOr(LOG_FILE_ENV, "")
    console = getEnvOrBool(LOG_CONSOLE_ENV, False)
    if not level and not logFile and not console:
        return None

    config: Dict[str, Any] = {"level": level or "INFO", "console": console}
    if logFile:
        config["file"] = logFile
    return config
