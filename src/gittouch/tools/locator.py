# tools/locator.py — поиск исполняемого файла git по PATH
from __future__ import annotations

import errno
import os
import stat

from gittouch.core.errors import PathTooLongError, ToolDirError, ToolNotFoundError
from gittouch.utils import json_logger as log

TOOL_NAME = "git"


def search_dirs(value: str | None) -> list[str]:
    """Делит значение PATH по ':'; пустые сегменты пропускаются, порядок сохраняется."""
    if not value:
        return []
    return [d for d in value.split(":") if d]


def _is_executable_file(path: str) -> bool:
    try:
        st = os.stat(path)
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode) and os.access(path, os.X_OK)


def tool_in_dir(directory: str, name: str = TOOL_NAME, verify_executable: bool = False) -> bool:
    """
    Проверяет, есть ли в ``directory`` запись с именем ``name``.

    Сравниваются только имена записей каталога. Если существующий каталог
    не открывается, это ошибка, а не «не найдено».
    """
    try:
        with os.scandir(directory) as entries:
            found = any(entry.name == name for entry in entries)
    except FileNotFoundError as e:
        # несуществующий каталог в PATH считается «не найдено», поиск продолжается
        log.warn("locator", "tool_dir_missing", str(e), directory=directory)
        return False
    except OSError as e:
        log.error("locator", "tool_dir_error", str(e), directory=directory)
        raise ToolDirError.from_os_error(f"Cannot open directory {directory}", e) from e
    if found and verify_executable:
        return _is_executable_file(os.path.join(directory, name))
    return found


def find_tool(
    path_value: str | None,
    name: str = TOOL_NAME,
    path_max: int = 4096,
    verify_executable: bool = False,
) -> str:
    for directory in search_dirs(path_value):
        # непрочитываемый каталог прерывает весь поиск (ToolDirError летит наружу)
        if not tool_in_dir(directory, name, verify_executable=verify_executable):
            log.debug("locator", "tool_miss", "no match", directory=directory)
            continue
        resolved = f"{directory}/{name}"
        if len(os.fsencode(resolved)) + 1 > path_max:
            raise PathTooLongError(
                f"Couldn't find {name} executable in path: {os.strerror(errno.ERANGE)}"
            )
        log.info("locator", "tool_found", f"{name} located", path=resolved)
        return resolved
    raise ToolNotFoundError(f"Couldn't find {name} executable in path: {os.strerror(errno.ENOENT)}")
