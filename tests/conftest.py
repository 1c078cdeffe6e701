# tests/conftest.py
# Назначение: добавить <repo_root>/src в sys.path, чтобы `from gittouch ...`
# работал при запуске pytest из корня без установки пакета.

import sys
from pathlib import Path

import pytest

_REPO_ROOT = Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
_src_str = str(_SRC)

if _SRC.exists() and _src_str not in sys.path:
    sys.path.insert(0, _src_str)


@pytest.fixture(autouse=True)
def _isolated_logger(monkeypatch, tmp_path):
    """Логгер глобальный: возвращаем порог по умолчанию и убираем чужой конфиг."""
    from gittouch.utils import json_logger

    monkeypatch.setattr(json_logger, "LEVEL", json_logger._LEVELS["WARN"])
    monkeypatch.setattr(json_logger, "LOG_PATH", None)
    monkeypatch.setenv("GIT_TOUCH_CONFIG", str(tmp_path / "no-such-config.yaml"))
    for name in ("LOG_LEVEL", "LOG_FILE", "PATH_VAR", "PATH_MAX", "VERIFY_EXECUTABLE", "INHERIT_ENV"):
        monkeypatch.delenv(f"GIT_TOUCH_{name}", raising=False)


@pytest.fixture
def fake_exec(monkeypatch):
    """Подменяет os.execve: записывает вызовы вместо замены процесса."""
    import os

    calls: list[tuple[str, list[str], dict[str, str]]] = []

    def _execve(path, argv, env):
        calls.append((path, list(argv), dict(env)))

    monkeypatch.setattr(os, "execve", _execve)
    return calls


@pytest.fixture
def git_dir(tmp_path):
    """Каталог с исполняемым ``git``-заглушкой."""
    d = tmp_path / "bin"
    d.mkdir()
    git = d / "git"
    git.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    git.chmod(0o755)
    return d
