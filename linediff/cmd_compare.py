from __future__ import annotations

import logging
from typing import Optional

from linediff.cmd_base import Base
from linediff.color import StyleError
from linediff.config import ParseError
from linediff.diff import compare, compare_chars, diff, diff_chars, stats
from linediff.print_diff import PrintDiffMixin
from linediff.render import EMPTY_MESSAGE, render_document

log = logging.getLogger(__name__)

FORMATS = ("html", "text", "document")
STDIN_PATH = "-"


class Compare(PrintDiffMixin, Base):
    """
    Compare two files line by line.

    ``html`` writes the marked-up fragments, ``document`` wraps them in a
    standalone page and ``text`` prints ``+``/``-`` prefixed lines, coloured
    when writing to a terminal.
    """

    def define_options(self) -> None:
        self.chars = False
        self.show_stat = False
        self.format: Optional[str] = None
        self.paths: list[str] = []

        args = iter(self.args)
        for arg in args:
            if arg == "--chars":
                self.chars = True
            elif arg == "--stat":
                self.show_stat = True
            elif arg.startswith("--format="):
                self.format = arg.split("=", 1)[1]
            elif arg in ("-f", "--format"):
                self.format = next(args, None)
                if self.format is None:
                    self.usage(f"error: option {arg} needs a value")
            elif arg == STDIN_PATH or not arg.startswith("-"):
                self.paths.append(arg)
            else:
                self.usage(f"error: unknown option: {arg}")

        if len(self.paths) != 2:
            self.usage("usage: linediff compare [--format=<fmt>] [--chars] [--stat] <a> <b>")

        if self.paths.count(STDIN_PATH) > 1:
            self.usage("error: standard input can only be read once")

        if self.format is None:
            configured = self.config.get(["output", "format"])
            self.format = str(configured) if configured else "html"

        if self.format not in FORMATS:
            self.usage(f"error: unknown format: {self.format}")

    def usage(self, message: str) -> None:
        self.eprintln(message)
        self.exit(129)

    def run(self) -> None:
        try:
            self.compare_inputs()
        except (ParseError, StyleError) as e:
            self.eprintln(f"error: {e}")
            self.exit(3)

        self.exit(0)

    def compare_inputs(self) -> None:
        self.define_options()

        a_path, b_path = self.paths
        a, b = self.read_input(a_path), self.read_input(b_path)
        log.debug(f"comparing {a_path} ({len(a)} chars) with {b_path} ({len(b)} chars)")

        if self.format == "text":
            self.print_text(a_path, b_path, a, b)
        else:
            self.print_html(a, b)

        if self.show_stat:
            edits = diff_chars(a, b) if self.chars else diff(a, b)
            self.println(str(stats(edits)))

    def print_html(self, a: str, b: str) -> None:
        body = compare_chars(a, b) if self.chars else compare(a, b)

        if self.format == "document":
            self.write(render_document(body, self.empty_message()))
        elif body:
            self.println(body)
        else:
            self.println(self.empty_message())

    def print_text(self, a_path: str, b_path: str, a: str, b: str) -> None:
        edits = diff_chars(a, b) if self.chars else diff(a, b)

        if not edits:
            self.println(self.empty_message())
            return

        # resolve colours before the pager takes over stdout
        self.diff_styles()
        self.setup_pager()
        self.print_header(f"--- {a_path}")
        self.print_header(f"+++ {b_path}")
        self.print_text_diff(edits)

    def read_input(self, path: str) -> str:
        if path == STDIN_PATH:
            return self.stdin.read()

        try:
            # bytes keep "\r\n" intact; read_text would translate it
            return self.expanded_path(path).read_bytes().decode("utf-8")
        except FileNotFoundError:
            self.eprintln(f"fatal: could not read '{path}': No such file or directory")
        except IsADirectoryError:
            self.eprintln(f"fatal: could not read '{path}': Is a directory")
        except PermissionError:
            self.eprintln(f"fatal: could not read '{path}': Permission denied")
        except UnicodeDecodeError:
            self.eprintln(f"fatal: could not read '{path}': not a UTF-8 text file")
        except OSError as e:
            self.eprintln(f"fatal: could not read '{path}': {e.strerror}")

        self.exit(1)
        return ""

    def empty_message(self) -> str:
        message = self.config.get(["output", "empty-message"])
        return str(message) if message else EMPTY_MESSAGE
