from __future__ import annotations

import os
from collections.abc import Mapping

from gittouch.core.create import create_file
from gittouch.core.parents import ensure_parents
from gittouch.core.settings import Settings
from gittouch.tools.launcher import build_env, exec_tool
from gittouch.tools.locator import TOOL_NAME, find_tool


class TouchRunner:
    """
    TouchRunner выполняет шаги git-touch строго по порядку:

      1. ensure_parents — недостающие родительские каталоги;
      2. create_file    — сам файл (существующий файл не ошибка);
      3. find_tool      — git в каталогах PATH, первое совпадение;
      4. exec_tool      — замена процесса на `git add <filename>`.

    Файл создаётся до поиска git: если git не найден, файл уже существует.
    Любой GitTouchError прерывает выполнение; отката нет.
    """

    def __init__(self, settings: Settings, environ: Mapping[str, str] | None = None):
        self.settings = settings
        # окружение снимаем один раз
        self.environ = dict(os.environ if environ is None else environ)

    def locate(self) -> str:
        return find_tool(
            self.environ.get(self.settings.path_var),
            TOOL_NAME,
            path_max=self.settings.path_max,
            verify_executable=self.settings.verify_executable,
        )

    def run(self, filename: str) -> None:
        ensure_parents(filename)
        create_file(filename)
        tool_path = self.locate()
        env = build_env(self.settings.inherit_env, self.environ)
        exec_tool(tool_path, filename, env)
