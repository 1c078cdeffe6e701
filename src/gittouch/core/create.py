# core/create.py — эксклюзивное создание файла (семантика touch)
from __future__ import annotations

import os

import click

from gittouch.core.errors import CreateFileError
from gittouch.utils import json_logger as log

FILE_MODE = 0o644
EXISTS_MESSAGE = "File exists, ignoring request to create."


def create_file(path: str, mode: int = FILE_MODE) -> bool:
    """
    Создаёт пустой ``path`` с O_EXCL. Уже существующий файл — не ошибка:
    сообщаем и возвращаем False. Содержимое никогда не пишется.
    """
    try:
        fd = os.open(path, os.O_CREAT | os.O_EXCL | os.O_WRONLY, mode)
    except FileExistsError:
        click.echo(EXISTS_MESSAGE, err=True)
        log.info("create", "file_exists", EXISTS_MESSAGE, path=path)
        return False
    except OSError as e:
        log.error("create", "file_create_error", str(e), path=path)
        raise CreateFileError.from_os_error("Couldn't create file", e) from e
    os.close(fd)
    log.info("create", "file_created", "file created", path=path)
    return True
