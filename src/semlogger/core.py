"""
Dispatcher construction using Factory and Builder patterns
"""

import sys
from typing import Any, Dict, List, Optional, Union

from loguru import logger as _logger

from .environment import HostEnvironment
from .levels import INFO, LogLevel
from .logger import SemanticLogger
from .multi import MultiSemanticLogger
from .sinks import LoguruLogger
from .sls import SLSConfig, SLSSemanticLogger


class LoggerConfig:
    """Logger configuration data class"""

    def __init__(self):
        self.name: str = ""
        self.level: LogLevel = INFO
        self.format: str = "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | <light-blue>{extra[tag]}</light-blue> | {message}"
        self.console_enabled: bool = True
        self.file_enabled: bool = False
        self.file_path: Optional[str] = None
        self.sls_enabled: bool = False
        self.sls_config: Optional[SLSConfig] = None
        self.application: str = ""
        self.sinks: List[SemanticLogger] = []
        self.extra: Dict[str, Any] = {}


class LoggerBuilder:
    """Builder pattern for creating configured dispatchers"""

    def __init__(self):
        self._config = LoggerConfig()

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set the name stamped on every payload"""
        self._config.name = name
        return self

    def with_level(self, level: Union[str, LogLevel]) -> "LoggerBuilder":
        """Set the minimum level written by console and file handlers"""
        if isinstance(level, str):
            level = LogLevel.from_name(level)
        self._config.level = level
        return self

    def with_format(self, format_str: str) -> "LoggerBuilder":
        self._config.format = format_str
        return self

    def with_console(self, enabled: bool = True) -> "LoggerBuilder":
        self._config.console_enabled = enabled
        return self

    def with_file(self, file_path: str) -> "LoggerBuilder":
        self._config.file_enabled = True
        self._config.file_path = file_path
        return self

    def with_sls(self, sls_config: SLSConfig) -> "LoggerBuilder":
        self._config.sls_enabled = True
        self._config.sls_config = sls_config
        return self

    def with_application(self, application: str) -> "LoggerBuilder":
        """Override the application name (defaults to the invocation name)"""
        self._config.application = application
        return self

    def with_sink(self, sink: SemanticLogger) -> "LoggerBuilder":
        """Append an extra backend after the built-in ones"""
        self._config.sinks.append(sink)
        return self

    def with_extra(self, **kwargs) -> "LoggerBuilder":
        """Add extra context bound to the loguru backend"""
        self._config.extra.update(kwargs)
        return self

    def build(self) -> MultiSemanticLogger:
        return LoggerFactory.create_logger(self._config)


class LoggerFactory:
    """Factory for creating dispatchers"""

    @staticmethod
    def create_logger(config: LoggerConfig) -> MultiSemanticLogger:
        """Create a dispatcher based on configuration"""
        # Remove existing handlers
        _logger.remove()

        environment = HostEnvironment(application=config.application)
        level = config.level.to_loguru()

        if config.console_enabled:
            _logger.add(sys.stdout, format=config.format, level=level, enqueue=True)

        if config.file_enabled and config.file_path:
            _logger.add(config.file_path, format=config.format, level=level, enqueue=True)

        dispatcher = MultiSemanticLogger(environment=environment)

        if config.console_enabled or (config.file_enabled and config.file_path):
            dispatcher.add(
                LoguruLogger(
                    _logger.bind(**config.extra),
                    name=config.name,
                    environment=environment,
                )
            )

        if config.sls_enabled and config.sls_config:
            sls_logger = SLSSemanticLogger.create(
                config.sls_config, name=config.name, environment=environment
            )
            if sls_logger:
                dispatcher.add(sls_logger)

        dispatcher.add(*config.sinks)
        return dispatcher

    @staticmethod
    def create_basic_logger(name: str = "default", level: Union[str, LogLevel] = "INFO"):
        """Create a console dispatcher with minimal configuration"""
        return LoggerBuilder().with_name(name).with_level(level).with_console().build()
