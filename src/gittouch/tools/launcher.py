# tools/launcher.py — замена текущего процесса на `git add <filename>`
from __future__ import annotations

import os
from collections.abc import Mapping

from gittouch.core.errors import LaunchError
from gittouch.utils import json_logger as log


def build_argv(tool_path: str, filename: str) -> list[str]:
    return [tool_path, "add", filename]


def build_env(inherit: bool = False, environ: Mapping[str, str] | None = None) -> dict[str, str]:
    # по умолчанию git получает пустое окружение, как и прежде
    if not inherit:
        return {}
    return dict(os.environ if environ is None else environ)


def exec_tool(tool_path: str, filename: str, env: Mapping[str, str]) -> None:
    """При успехе не возвращается: образ процесса заменяется."""
    argv = build_argv(tool_path, filename)
    log.info("launcher", "exec", "replacing process", argv=argv, env_keys=sorted(env))
    try:
        os.execve(tool_path, argv, dict(env))
    except OSError as e:
        log.error("launcher", "exec_error", str(e), path=tool_path)
        raise LaunchError.from_os_error(f"Couldn't execute {tool_path}", e) from e
