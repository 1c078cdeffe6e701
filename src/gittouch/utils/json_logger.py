# Назначение: единый JSON-логгер (stderr + опциональный файл JSONL)
from __future__ import annotations

import datetime as dt
import json
import pathlib
import sys
from contextlib import suppress

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40, "CRITICAL": 50}
LEVEL = _LEVELS["WARN"]
LOG_PATH: pathlib.Path | None = None


def configure(level: str = "WARN", path: str | None = None) -> None:
    """Порог и файл задаются один раз при старте (см. core/settings.py)."""
    global LEVEL, LOG_PATH
    LEVEL = _LEVELS.get(level.upper(), _LEVELS["WARN"])
    LOG_PATH = pathlib.Path(path) if path else None


def _now_iso():
    return dt.datetime.now(dt.timezone.utc).astimezone().isoformat()


def log(level: str, component: str, event: str, msg: str, **fields):
    if _LEVELS[level] < LEVEL:
        return
    rec = {
        "ts": _now_iso(),
        "level": level,
        "component": component,
        "event": event,
        "msg": msg,
        **fields,
    }
    line = json.dumps(rec, ensure_ascii=False)
    try:
        line.encode("utf-8")
    except UnicodeEncodeError:
        # не-UTF-8 имена файлов (surrogateescape): экранируем как \uXXXX, JSON остаётся валидным
        line = json.dumps(rec)
    # stdout принадлежит git после exec, поэтому пишем в stderr
    print(line, file=sys.stderr)
    if LOG_PATH is not None:
        # файл журнала вспомогательный и не должен ронять основной сценарий
        with suppress(OSError), LOG_PATH.open("a", encoding="utf-8") as f:
            f.write(line + "\n")


def info(component, event, msg, **kw):
    log("INFO", component, event, msg, **kw)


def warn(component, event, msg, **kw):
    log("WARN", component, event, msg, **kw)


def error(component, event, msg, **kw):
    log("ERROR", component, event, msg, **kw)


def debug(component, event, msg, **kw):
    log("DEBUG", component, event, msg, **kw)
