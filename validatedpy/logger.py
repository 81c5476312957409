"""Line-per-record diagnostics for validation helpers.

Records carry a timestamp, the logger name, a level, a message and any bound
or per-call fields. They render either as ``[ts] name LEVEL: msg k=v`` text
or as one compact JSON object, and go to ``stream`` (stderr when unset).
"""
from __future__ import annotations
import sys, datetime as _dt, json
from typing import Any, Dict, Mapping, Optional, TextIO

LEVELS: Dict[str, int] = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}
_NAMES = {n: k for k, n in LEVELS.items()}


def _level_no(level: str, fallback: int) -> int:
    return LEVELS.get(level.upper(), fallback)


def _render_text(record: Mapping[str, Any]) -> str:
    fields = record.get("fields") or {}
    tail = "".join(f" {k}={fields[k]}" for k in sorted(fields))
    return f"[{record['ts']}] {record['name']} {record['level']}: {record['msg']}{tail}"


def _render_json(record: Mapping[str, Any]) -> str:
    return json.dumps(record, separators=(",", ":"), default=repr)


class ConsoleLogger:
    def __init__(self, name: str = "validatedpy", level: str = "INFO", json_output: bool = False,
                 context: Optional[Dict[str, Any]] = None, stream: Optional[TextIO] = None):
        self.name = name
        self.threshold = _level_no(level, LEVELS["INFO"])
        self.render = _render_json if json_output else _render_text
        self.context: Dict[str, Any] = dict(context or {})
        self.stream = stream

    @property
    def json_output(self) -> bool:
        return self.render is _render_json

    @property
    def level_name(self) -> str:
        return _NAMES.get(self.threshold, "INFO")

    def set_level(self, level: str) -> None:
        self.threshold = _level_no(level, self.threshold)

    def is_enabled(self, level: str) -> bool:
        return LEVELS[level] >= self.threshold

    def bind(self, **fields: Any) -> "ConsoleLogger":
        return ConsoleLogger(self.name, self.level_name, self.json_output,
                             {**self.context, **fields}, self.stream)

    def log(self, level: str, msg: str, **fields: Any) -> None:
        if not self.is_enabled(level):
            return
        record: Dict[str, Any] = {
            "ts": _dt.datetime.now(_dt.timezone.utc).isoformat(),
            "name": self.name,
            "level": level,
            "msg": msg,
        }
        merged = {**self.context, **fields}
        if merged:
            record["fields"] = merged
        # looked up per call so a redirected sys.stderr is honoured
        print(self.render(record), file=self.stream or sys.stderr)

    def debug(self, msg: str, **fields: Any) -> None: self.log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self.log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self.log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self.log("ERROR", msg, **fields)


_default = ConsoleLogger()


def get_logger() -> ConsoleLogger:
    return _default
