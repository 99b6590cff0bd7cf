"""
    Logging support for reporting diagnostics against outer-document locations.

    Besides the standard levels, two are added:
    - hint: suggestions for improvement, similar to linter messages. Between info and warning.
    - detail: reporting on extraction steps, e.g. each inline document found and the
      offset computed for it. Between debug and info.

    Locations are zero-based everywhere in inlinedoc. They are converted to one-based
    line and column numbers when attached to log records, since that is what
    editors and users expect to see.
"""
from typing import Any
import logging
import pathlib
import sys
import abc

from .source_location import SourceLocation, SourceRange

# Add HINT and DETAIL logging levels without monkey patching anything.
def add_logging_level(level: int, name: str, lower_bound: int, upper_bound: int) -> int:
    existing_level = logging.getLevelName(name)
    # ^^^ getLevelName returns a level number for a known name, but the string "Level <name>"
    # for an unknown one
    if isinstance(existing_level, str):
        existing_level = None

    if existing_level is None:
        assert lower_bound < level < upper_bound
        logging.addLevelName(level, name)
        return level
    if existing_level > upper_bound or existing_level < lower_bound:
        print(f"warning: inlinedoc: log level {name} was not configured in expected range", file=sys.stderr)
    return existing_level

HINT: int = add_logging_level(25, "HINT", logging.INFO, logging.WARNING)
DETAIL: int = add_logging_level(15, "DETAIL", logging.DEBUG, logging.INFO)

log_levels = {
    'CRITICAL': logging.CRITICAL,
    'ERROR': logging.ERROR,
    'WARNING': logging.WARNING,
    'HINT': HINT,
    'INFO': logging.INFO,
    'DETAIL': DETAIL,
    'DEBUG': logging.DEBUG,
}

class DiagnosticsLogger(metaclass=abc.ABCMeta):
    """Facade for logging compiler-style diagnostic messages.

    calls follow one of two patterns:
        log.error(message, ...)
        log.error(message_id, message, ...)
    where ... are optional type-dispatched extras (SourceLocation, SourceRange, Path)
    and keyword extras (line, column, scopes). A message id is required at info and above."""
    @abc.abstractmethod
    def error(self, msg_id_or_msg: str, *msg_and_or_extras, **kwextras):
        pass

    @abc.abstractmethod
    def detail(self, msg_id_or_msg: str, *msg_and_or_extras, **kwextras):
        pass

    @abc.abstractmethod
    def log_at(self, level: int, msg_id_or_msg: str, *msg_and_or_extras, **kwextras):
        pass


class RootDiagnosticsLogger(DiagnosticsLogger):
    """Diagnostics logger that writes to a `logging.Logger` and counts messages per level."""
    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.message_counts: dict[int, int] = {level: 0 for level in log_levels.values()}

    def error_count(self) -> int:
        return self.message_counts[logging.ERROR]

    def warning_count(self) -> int:
        return self.message_counts[logging.WARNING]

    def _decode_extras(self, extras: tuple[Any, ...], kwextras: dict[str, Any]) -> dict[str, Any]:
        """interpret extras and kwextras as record fields source_file, source_line (1-based),
        source_column (1-based) and scopes"""
        fields: dict[str, Any] = {}
        for obj in extras:
            if isinstance(obj, SourceRange):
                obj = obj.start
            if isinstance(obj, SourceLocation):
                # one location per message, the last one wins
                fields.update(source_file=obj.file, source_line=obj.line + 1, source_column=obj.column + 1)
            elif isinstance(obj, pathlib.Path):
                fields['source_file'] = obj
            else:
                assert False, f"unrecognised type-dispatched extra log argument {repr(obj)}"

        for name, value in kwextras.items():
            if name in ("line", "column"):
                fields['source_' + name] = value
            elif name == "scopes":
                fields['scopes'] = value
            else:
                assert False, f"unrecognised keyword extra log argument {name} = {repr(value)}"

        return {name: value for name, value in fields.items() if value is not None}

    def _log(self, level: int, msg_id_or_msg: str, msg_and_or_extras: tuple[Any, ...], kwextras: dict[str, Any]):
        if msg_and_or_extras and isinstance(msg_and_or_extras[0], str):
            message_id, message, extras = msg_id_or_msg, msg_and_or_extras[0], msg_and_or_extras[1:]
        else:
            message_id, message, extras = None, msg_id_or_msg, msg_and_or_extras

        if level >= logging.INFO:
            assert message_id is not None, "message_id is required for logging at 'info' level and above"

        extra = {'message_id': message_id, **self._decode_extras(extras, kwextras)}
        self.logger.log(level, message, extra=extra)
        self.message_counts[level] = self.message_counts.get(level, 0) + 1

    def error(self, msg_id_or_msg: str, *msg_and_or_extras, **kwextras):
        self._log(logging.ERROR, msg_id_or_msg, msg_and_or_extras, kwextras)

    def detail(self, msg_id_or_msg: str, *msg_and_or_extras, **kwextras):
        self._log(DETAIL, msg_id_or_msg, msg_and_or_extras, kwextras)

    def log_at(self, level: int, msg_id_or_msg: str, *msg_and_or_extras, **kwextras):
        self._log(level, msg_id_or_msg, msg_and_or_extras, kwextras)


class ScopedDiagnosticsLogger(DiagnosticsLogger):
    """Wrapper logger that prepends scopes to log messages,
    e.g. the type of the inline document a diagnostic came from."""
    def __init__(self, sink: DiagnosticsLogger, scopes: tuple[str,...]|str):
        self.sink = sink
        self.scopes = scopes if isinstance(scopes, tuple) else (scopes,)

    def _add_scopes(self, kwextras: dict[str, Any]) -> dict[str, Any]:
        kwextras["scopes"] = self.scopes + kwextras.get("scopes", tuple())
        return kwextras

    def error(self, msg_id_or_msg: str, *msg_and_or_extras, **kwextras):
        self.sink.error(msg_id_or_msg, *msg_and_or_extras, **self._add_scopes(kwextras))

    def detail(self, msg_id_or_msg: str, *msg_and_or_extras, **kwextras):
        self.sink.detail(msg_id_or_msg, *msg_and_or_extras, **self._add_scopes(kwextras))

    def log_at(self, level: int, msg_id_or_msg: str, *msg_and_or_extras, **kwextras):
        self.sink.log_at(level, msg_id_or_msg, *msg_and_or_extras, **self._add_scopes(kwextras))


class DiagnosticRecordFormatter(logging.Formatter):
    """Format log records as `file:line:col: level: [message_id]: scopes: message`."""
    def formatMessage(self, record) -> str:
        source_file = record.__dict__.get('source_file', '')
        source_line = record.__dict__.get('source_line', None)
        source_column = record.__dict__.get('source_column', None)
        if (source_line is not None or source_column is not None) and not source_file:
            source_file = '<source>'
        source_location_str = ":".join(str(s) for s in (source_file, source_line, source_column) if s)

        message_id = record.__dict__.get('message_id', None)
        message_id = f"[{message_id}]" if message_id else None
        scopes = record.__dict__.get('scopes', tuple())
        message = record.__dict__['message']

        parts = (source_location_str, record.levelname.lower(), message_id) + scopes
        if message:
            return ": ".join(s for s in parts + (message,) if s)
        return ": ".join(s for s in parts if s) + ":"


def create_root_diagnostics_logger(initial_level=logging.DEBUG) -> RootDiagnosticsLogger:
    logger = logging.getLogger(name='inlinedoc')
    logger.setLevel(initial_level)
    if not logger.handlers:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.DEBUG)
        stream_handler.setFormatter(DiagnosticRecordFormatter())
        logger.addHandler(stream_handler)

    return RootDiagnosticsLogger(logger=logger)
