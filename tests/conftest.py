from io import StringIO
from pathlib import Path
from typing import (
    Callable,
    Mapping,
    Protocol,
    TypeAlias,
    cast,
)

import pytest

from linediff import config_stack
from linediff.cmd_base import Base
from linediff.command import Command
from tests.cmd_helpers import assert_status, assert_stderr, assert_stdout

__all__ = ["assert_status", "assert_stderr", "assert_stdout"]

LinediffCmdResult: TypeAlias = tuple[Base, StringIO, StringIO, StringIO]

WriteFile: TypeAlias = Callable[[str, str], Path]


class LinediffCmd(Protocol):
    def __call__(
        self,
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> LinediffCmdResult: ...


@pytest.fixture
def work_path(tmp_path: Path) -> Path:
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config_stack, "GLOBAL_CONFIG", tmp_path / "home" / ".linediffconfig")
    monkeypatch.setattr(config_stack, "SYSTEM_CONFIG", tmp_path / "etc" / "linediffconfig")
    monkeypatch.delenv("LINEDIFF_CONFIG", raising=False)


@pytest.fixture
def write_file(work_path: Path) -> WriteFile:
    def _write_file(name: str, contents: str) -> Path:
        path = work_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            f.write(contents)
        return path

    return _write_file


@pytest.fixture
def linediff_cmd(work_path: Path) -> LinediffCmd:
    def _linediff_cmd(
        *argv: str,
        env: Mapping[str, str] | None = None,
        stdin_data: str = "",
    ) -> LinediffCmdResult:
        stdin = StringIO(stdin_data)
        stdout = StringIO()
        stderr = StringIO()
        cmd = Command.execute(
            work_path,
            cast(dict[str, str], dict(env or {})),
            ["linediff"] + list(argv),
            stdin,
            stdout,
            stderr,
        )
        return cmd, stdin, stdout, stderr

    return _linediff_cmd
