from __future__ import annotations

import io
from functools import cached_property
from pathlib import Path
from typing import MutableMapping, Sequence, TextIO

from linediff.color import Color
from linediff.config_stack import ConfigStack
from linediff.pager import Pager


class Base:
    def __init__(
        self,
        _dir: Path,
        env: MutableMapping[str, str],
        args: list[str],
        stdin: TextIO,
        stdout: TextIO,
        stderr: TextIO,
    ):
        self.dir: Path = _dir
        self.env: MutableMapping[str, str] = env
        self.args: list[str] = args
        self.stdin: TextIO = stdin
        self.stdout: TextIO = stdout
        self.stderr: TextIO = stderr
        self.status: int | None = None
        self.isatty: bool = stdout.isatty()
        self.pager: Pager | None = None

    @cached_property
    def config(self) -> ConfigStack:
        return ConfigStack(self.dir, self.env)

    def setup_pager(self) -> None:
        if self.pager is not None:
            return

        if not self.stdout.isatty():
            return

        command = self.config.get(["core", "pager"])
        self.pager = Pager(
            self.env, self.stdout, self.stderr, str(command) if command else None
        )
        self.stdout = self.pager.input

    def exit(self, status: int = 0) -> None:
        self.status = status
        raise ExitSignal(self.status)

    def execute(self) -> int:
        try:
            self.run()
            self.status = 0
        except ExitSignal as e:
            self.status = e.status

        self.stdout.flush()
        self.stderr.flush()

        if self.pager is not None:
            self.stdout.close()
            self.pager.wait()

        assert self.status is not None
        return self.status

    def expanded_path(self, path: str) -> Path:
        return (self.dir / path).absolute()

    def fmt(self, style: str | Sequence[str], string: str) -> str:
        return Color.format(style, string) if self.isatty else string

    def run(self) -> None:
        raise NotImplementedError(f"{self.__class__.__name__}.run() not implemented")

    def write(self, string: str) -> None:
        if isinstance(self.stdout, io.BufferedIOBase):
            self.stdout.write(string.encode("utf-8"))
        else:
            self.stdout.write(string)

    def println(self, string: str) -> None:
        self.write(string + "\n")

    def eprintln(self, string: str) -> None:
        if isinstance(self.stderr, io.BufferedIOBase):
            self.stderr.write((string + "\n").encode("utf-8"))
        else:
            self.stderr.write(string + "\n")


class ExitSignal(Exception):
    def __init__(self, status: int = 0) -> None:
        super().__init__(f"Exit with status {status}")
        self.status: int | None = status
