# core/parents.py — создание недостающих родительских каталогов
from __future__ import annotations

import os
import posixpath

from gittouch.core.errors import ParentCheckError, ParentCreateError
from gittouch.utils import json_logger as log

DIR_MODE = 0o777


def parent_of(path: str) -> str:
    """POSIX dirname: хвостовые '/' игнорируются, голое имя -> '.'."""
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    parent = posixpath.dirname(stripped).rstrip("/")
    if not parent:
        return "/" if stripped.startswith("/") else "."
    return parent


def missing_ancestors(path: str) -> list[str]:
    """
    Возвращает отсутствующих предков ``path`` в порядке от корня к листу.

    Подъём идёт вверх до первого существующего каталога. Любая ошибка stat,
    кроме ENOENT, прерывает обход.
    """
    missing: list[str] = []
    current = parent_of(path)
    while True:
        try:
            os.stat(current)
        except FileNotFoundError:
            missing.append(current)
            upper = parent_of(current)
            if upper == current:
                break
            current = upper
            continue
        except OSError as e:
            log.error("parents", "parents_check_error", str(e), path=current)
            raise ParentCheckError.from_os_error("Couldn't check existence of parent directory", e) from e
        break
    missing.reverse()
    return missing


def ensure_parents(path: str) -> list[str]:
    created: list[str] = []
    for directory in missing_ancestors(path):
        try:
            os.mkdir(directory, DIR_MODE)
        except OSError as e:
            # уже созданные каталоги не откатываем
            log.error("parents", "parents_create_error", str(e), path=directory, created=created)
            raise ParentCreateError.from_os_error("Couldn't create parent directory", e) from e
        created.append(directory)
    if created:
        log.info("parents", "parents_created", f"created {len(created)} director(ies)", created=created)
    return created
