# core/errors.py — таксономия ошибок git-touch; code = errno для кода выхода
from __future__ import annotations

import errno
import os


class GitTouchError(Exception):
    """Фатальная ошибка вызова. ``code`` уходит наружу как код выхода процесса."""

    def __init__(self, message: str, code: int = 1):
        super().__init__(message)
        self.message = message
        self.code = code or 1

    @classmethod
    def from_os_error(cls, prefix: str, exc: OSError) -> GitTouchError:
        reason = exc.strerror or (os.strerror(exc.errno) if exc.errno else str(exc))
        return cls(f"{prefix}: {reason}", exc.errno or 1)

    def __str__(self) -> str:
        return self.message


class ConfigError(GitTouchError):
    def __init__(self, message: str, code: int = errno.EINVAL):
        super().__init__(message, code)


class ParentCheckError(GitTouchError):
    pass


class ParentCreateError(GitTouchError):
    pass


class CreateFileError(GitTouchError):
    pass


class ToolDirError(GitTouchError):
    pass


class ToolNotFoundError(GitTouchError):
    def __init__(self, message: str, code: int = errno.ENOENT):
        super().__init__(message, code)


class PathTooLongError(GitTouchError):
    def __init__(self, message: str, code: int = errno.ERANGE):
        super().__init__(message, code)


class LaunchError(GitTouchError):
    pass
