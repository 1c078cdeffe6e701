from __future__ import annotations

import errno
import os

import pytest

from gittouch.core.errors import ParentCheckError, ParentCreateError
from gittouch.core.parents import ensure_parents, missing_ancestors, parent_of


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("file.txt", "."),
        ("a/b/c/file.txt", "a/b/c"),
        ("/file.txt", "/"),
        ("/usr/lib/x", "/usr/lib"),
        ("a/b/", "a"),
        ("a//b", "a"),
        ("/", "/"),
    ],
)
def test_parent_of(path, expected):
    assert parent_of(path) == expected


def test_multi_level_chain_created_root_to_leaf(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    created = ensure_parents("a/b/c/file.txt")
    assert created == ["a", "a/b", "a/b/c"]
    for d in ("a", "a/b", "a/b/c"):
        assert (tmp_path / d).is_dir()
    assert not (tmp_path / "a/b/c/file.txt").exists()


def test_stops_at_first_existing_ancestor(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "a" / "b").mkdir(parents=True)
    assert missing_ancestors("a/b/c/d/f") == ["a/b/c", "a/b/c/d"]


def test_bare_filename_is_noop(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    def no_mkdir(*_a, **_kw):
        raise AssertionError("mkdir must not be called")

    monkeypatch.setattr(os, "mkdir", no_mkdir)
    assert ensure_parents("file.txt") == []


def test_existing_parent_is_noop(tmp_path):
    assert ensure_parents(str(tmp_path / "file.txt")) == []


def test_stat_error_other_than_enoent_aborts(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    created: list[str] = []
    real_mkdir = os.mkdir
    real_stat = os.stat

    def denied(path, *a, **kw):
        if str(path).startswith("x"):
            raise PermissionError(errno.EACCES, "Permission denied", path)
        return real_stat(path, *a, **kw)

    def recording_mkdir(path, *a, **kw):
        created.append(path)
        real_mkdir(path, *a, **kw)

    monkeypatch.setattr(os, "stat", denied)
    monkeypatch.setattr(os, "mkdir", recording_mkdir)
    with pytest.raises(ParentCheckError) as exc:
        ensure_parents("x/y/file.txt")
    assert exc.value.code == errno.EACCES
    assert "Couldn't check existence of parent directory" in str(exc.value)
    assert created == []


def test_create_failure_keeps_already_created(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    real_mkdir = os.mkdir

    def flaky_mkdir(path, *a, **kw):
        if path == "a/b":
            raise PermissionError(errno.EACCES, "Permission denied", path)
        real_mkdir(path, *a, **kw)

    monkeypatch.setattr(os, "mkdir", flaky_mkdir)
    with pytest.raises(ParentCreateError) as exc:
        ensure_parents("a/b/c/file.txt")
    assert exc.value.code == errno.EACCES
    assert (tmp_path / "a").is_dir()
    assert not (tmp_path / "a" / "b").exists()
