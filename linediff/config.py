from __future__ import annotations

import logging
import re
from collections import defaultdict
from dataclasses import dataclass
from pathlib import Path
from typing import (
    List,
    Optional,
    Pattern,
    Sequence,
    TextIO,
    Tuple,
    TypeAlias,
    cast,
)

log = logging.getLogger(__name__)

ConfigValue: TypeAlias = bool | int | str

SECTION_LINE: Pattern[str] = re.compile(
    r'^\s*\[([a-z0-9-]+)( "(.+)")?\]\s*(?:$|#|;)', re.I
)
VARIABLE_LINE: Pattern[str] = re.compile(
    r"^\s*([a-z][a-z0-9-]*)\s*=\s*(.*?)\s*(?:$|#|;)", re.I | re.M
)
BLANK_LINE: Pattern[str] = re.compile(r"^\s*(?:$|#|;)")
INTEGER: Pattern[str] = re.compile(r"^-?[1-9][0-9]*$")

VALID_SECTION: Pattern[str] = re.compile(r"^[a-z0-9-]+$", re.I)
VALID_VARIABLE: Pattern[str] = re.compile(r"^[a-z][a-z0-9-]*$", re.I)


class ParseError(Exception):
    pass


@dataclass
class Section:
    name: Sequence[str]

    @staticmethod
    def normalize(name: Sequence[str]) -> tuple[str, str] | None:
        if not name:
            return None
        head = name[0].lower()
        tail = ".".join(name[1:])
        return (head, tail)


@dataclass
class Variable:
    name: str
    value: ConfigValue

    @staticmethod
    def normalize(name: Optional[str]) -> Optional[str]:
        return name.lower() if name else None


@dataclass
class Line:
    text: str
    section: Section
    variable: Optional[Variable] = None

    @property
    def normal_variable(self) -> Optional[str]:
        return Variable.normalize(self.variable.name) if self.variable else None


class ConfigFile:
    """Read access to a single git-config style file."""

    def __init__(self, path: Path) -> None:
        self.path: Path = path
        self.lines: dict[tuple[str, str], List[Line]] = defaultdict(list)

    @staticmethod
    def valid_key(key: Sequence[str]) -> bool:
        return bool(VALID_SECTION.match(key[0])) and bool(VALID_VARIABLE.match(key[1]))

    def open(self) -> None:
        if not self.lines:
            self.read_config_file()

    def get(self, key: Sequence[str]) -> ConfigValue | None:
        try:
            retval = self.get_all(key)[-1]
        except IndexError:
            retval = None
        return retval

    def get_all(self, key: Sequence[str]) -> List[ConfigValue]:
        key, var = self.split_key(key)
        _, lines = self.find_lines(key, var)
        return [cast(Variable, ln.variable).value for ln in lines]

    def subsections(self, name: str) -> List[str]:
        norm = Section.normalize([name])
        if norm is None:
            return []
        name, _ = norm
        sections = []
        for main, sub in self.lines.keys():
            if main == name and sub != "":
                sections.append(sub)
        return sections

    def section_exists(self, key: Sequence[str]) -> bool:
        return Section.normalize([k for k in key if k]) in self.lines

    def line_count(self) -> int:
        return sum(len(ls) for ls in self.lines.values())

    def lines_for(self, section: Section) -> List[Line]:
        norm = Section.normalize(section.name)
        if norm is None:
            return []
        return self.lines[norm]

    @staticmethod
    def split_key(key: Sequence[str]) -> Tuple[List[str], str]:
        key = list(map(str, key))
        var = key.pop()
        return (key, var)

    def find_lines(
        self, key: Sequence[str], var: str
    ) -> Tuple[Optional[Section], List[Line]]:
        name = Section.normalize(key)
        if name not in self.lines:
            return (None, list())

        lines = self.lines[name]
        section = lines[0].section
        normal = Variable.normalize(var)
        lines = [ln for ln in lines if ln.normal_variable == normal]
        return (section, lines)

    def read_config_file(self) -> None:
        self.lines = defaultdict(list)
        section = Section([])

        try:
            with self.path.open("r", encoding="utf-8") as fh:
                log.debug(f"reading config file {self.path}")
                while True:
                    try:
                        raw = self.read_line(fh)
                    except EOFError:
                        break
                    line = self.parse_line(section, raw)
                    section = line.section
                    self.lines_for(section).append(line)
        except FileNotFoundError:
            pass

    @staticmethod
    def read_line(fh: TextIO) -> str:
        buffer = ""
        while True:
            chunk = fh.readline()
            if chunk == "":
                if buffer:
                    return buffer
                raise EOFError
            buffer += chunk
            if not buffer.endswith("\\\n"):
                return buffer

    def parse_line(self, section: Section, line: str) -> Line:
        if m := SECTION_LINE.match(line):
            section = Section([m.group(1)] + ([m.group(3)] if m.group(3) else []))
            return Line(line, section)
        if m := VARIABLE_LINE.match(line):
            variable = Variable(m.group(1), self.parse_value(m.group(2)))
            return Line(line, section, variable)
        if BLANK_LINE.match(line):
            return Line(line, section)
        raise ParseError(f"bad config line {self.line_count() + 1} in file {self.path}")

    @staticmethod
    def parse_value(value: str) -> ConfigValue:
        lower = value.lower()
        if lower in {"yes", "on", "true"}:
            return True
        if lower in {"no", "off", "false"}:
            return False
        if INTEGER.match(value):
            return int(value)
        return value.replace("\\\n", "")
