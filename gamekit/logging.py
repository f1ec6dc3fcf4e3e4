"""
GameKit logging.

Two channels:

- Console messages. ``get_logger('simulation').info("Game over at tick %d", n)``
  prints ``[simulation] INFO: Game over at tick 840`` when the logger's level
  allows it. Each logger follows the default level unless a level was set
  for its module.
- Structured records. ``emit_record('session', {...})`` hands a dict to the
  sink registered for 'session'. The standalone game registers one sink per
  run; FileSink appends JSON Lines, NullSink drops everything.

Environment (read once on import):
    GAMEKIT_LOG_LEVEL=DEBUG                 default console level
    GAMEKIT_LOG_SIMULATION=DEBUG            console level for one module
    GAMEKIT_LOG_DIR=/tmp/arkanoid           where FileSink writes
    GAMEKIT_LOGGING_SESSION_ENABLED=true    write 'session' records to disk
"""

import json
import os
import time
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, TextIO


class LogLevel(IntEnum):
    """Console levels, numbered like the standard logging module."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


_LABELS = {
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
    LogLevel.CRITICAL: 'CRIT',
}

_ENV_PREFIX = 'GAMEKIT_LOG_'
_RECORD_PREFIX = 'GAMEKIT_LOGGING_'
_RECORD_SUFFIX = '_ENABLED'

_settings: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},      # module key -> LogLevel
    'log_dir': None,          # None = GAMEKIT_LOG_DIR or ~/.local/share/gamekit/logs
    'record_modules': set(),  # modules whose records go to a FileSink
}


def parse_level(name: str) -> LogLevel:
    """Level for a name such as 'debug' or 'WARN'. Unknown names mean INFO."""
    name = name.upper()
    if name == 'WARN':
        return LogLevel.WARNING
    return LogLevel.__members__.get(name, LogLevel.INFO)


def _module_key(module: str) -> str:
    # 'arkanoid.main' and GAMEKIT_LOG_ARKANOID_MAIN name the same logger
    return module.lower().replace('.', '_')


def _is_truthy(value: str) -> bool:
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _load_env() -> None:
    """Apply GAMEKIT_LOG_* and GAMEKIT_LOGGING_*_ENABLED variables."""
    for key, value in os.environ.items():
        if key == 'GAMEKIT_LOG_LEVEL':
            _settings['default_level'] = parse_level(value)
        elif key == 'GAMEKIT_LOG_DIR':
            _settings['log_dir'] = value
        elif key.startswith(_ENV_PREFIX):
            module = key[len(_ENV_PREFIX):].lower()
            _settings['module_levels'][module] = parse_level(value)
        elif key.startswith(_RECORD_PREFIX) and key.endswith(_RECORD_SUFFIX):
            module = key[len(_RECORD_PREFIX):-len(_RECORD_SUFFIX)].lower()
            if _is_truthy(value):
                _settings['record_modules'].add(module)
            else:
                _settings['record_modules'].discard(module)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """Set the default console level, per-module levels and the record directory.

    Args:
        level: Default console level ('DEBUG', 'INFO', ..., 'OFF')
        modules: Module name -> level overrides
        log_dir: Directory for FileSink output
    """
    _settings['default_level'] = parse_level(level)
    for module, module_level in (modules or {}).items():
        _settings['module_levels'][_module_key(module)] = parse_level(module_level)
    if log_dir:
        _settings['log_dir'] = log_dir


def get_log_dir() -> Path:
    """Directory FileSink writes to when none is given explicitly."""
    configured = _settings['log_dir'] or os.environ.get('GAMEKIT_LOG_DIR')
    if configured:
        return Path(configured).expanduser()
    data_home = os.environ.get('XDG_DATA_HOME', str(Path.home() / '.local' / 'share'))
    return Path(data_home) / 'gamekit' / 'logs'


def records_enabled(module: str) -> bool:
    """Whether structured records for module should be written to disk."""
    return _module_key(module) in _settings['record_modules']


_load_env()


# =============================================================================
# Console loggers
# =============================================================================

class GameKitLogger:
    """Console logger for one module, printf-style arguments."""

    def __init__(self, module: str):
        self.module = module
        self._key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        return _settings['module_levels'].get(self._key, _settings['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def _log(self, level: LogLevel, msg: str, args: tuple) -> None:
        if not self.is_enabled_for(level):
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {_LABELS[level]}: {msg}")

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, args)

    def error(self, msg: str, *args) -> None:
        self._log(LogLevel.ERROR, msg, args)

    def critical(self, msg: str, *args) -> None:
        self._log(LogLevel.CRITICAL, msg, args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> GameKitLogger:
    """Get the (cached) logger for a module, e.g. 'simulation' or 'game_loop'."""
    return GameKitLogger(module)


# =============================================================================
# Structured records
# =============================================================================

class LogSink(ABC):
    """Destination for structured records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Write one JSON-serializable record for module."""
        pass

    @abstractmethod
    def close(self) -> None:
        """Release whatever the sink holds open."""
        pass


class FileSink(LogSink):
    """Appends records to ``<log_dir>/<session>_<module>.jsonl``.

    The first line of each file is a header naming the module and session,
    the last (written by close()) a footer with the end time. Records get a
    ``wall_time`` field unless they bring their own.

    Args:
        log_dir: Output directory (default: get_log_dir())
        session_name: File name prefix (default: start timestamp)
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._log_dir = Path(log_dir) if log_dir else None
        self._session_name = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._files: Dict[str, TextIO] = {}

    def path_for(self, module: str) -> Path:
        log_dir = self._log_dir if self._log_dir is not None else get_log_dir()
        return log_dir / f"{self._session_name}_{module}.jsonl"

    def _open(self, module: str) -> TextIO:
        path = self.path_for(module)
        path.parent.mkdir(parents=True, exist_ok=True)
        handle = open(path, 'a')
        handle.write(json.dumps({
            'type': 'header',
            'module': module,
            'session_name': self._session_name,
            'start_time': time.time(),
        }) + "\n")
        self._files[module] = handle
        return handle

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        handle = self._files.get(module) or self._open(module)
        handle.write(json.dumps({'wall_time': time.time(), **record}) + "\n")
        handle.flush()

    def close(self) -> None:
        for module, handle in self._files.items():
            handle.write(json.dumps({
                'type': 'footer',
                'module': module,
                'end_time': time.time(),
            }) + "\n")
            handle.close()
        self._files.clear()


class NullSink(LogSink):
    """Drops every record."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


_sinks: Dict[str, LogSink] = {}


def register_sink(module: str, sink: LogSink) -> None:
    """Route records for module to sink, replacing any earlier one."""
    _sinks[module] = sink


def create_sink(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if records are enabled for module, NullSink otherwise."""
    if records_enabled(module):
        return FileSink(session_name=session_name)
    return NullSink()


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """Send record to module's sink.

    Returns:
        False when no sink is registered for module
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister every sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()
