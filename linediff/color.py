from __future__ import annotations

from typing import Sequence

SGR_CODES: dict[str, int] = {
    "normal": 0,
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "ul": 4,
    "reverse": 7,
    "strike": 9,
    "black": 30,
    "red": 31,
    "green": 32,
    "yellow": 33,
    "blue": 34,
    "magenta": 35,
    "cyan": 36,
    "white": 37,
}

RESET = "\x1b[0m"


class StyleError(ValueError):
    pass


class Color:
    @staticmethod
    def parse(style: str | Sequence[str]) -> list[str]:
        names = style.split() if isinstance(style, str) else list(style)

        unknown = [name for name in names if name not in SGR_CODES]
        if unknown:
            raise StyleError(f"Unknown style name: {unknown[0]!r}")

        return names

    @staticmethod
    def sgr(names: Sequence[str]) -> str:
        codes = [SGR_CODES[name] for name in names]

        # a second colour in the same style is the background
        foreground = False
        for i, code in enumerate(codes):
            if 30 <= code <= 37:
                if foreground:
                    codes[i] += 10
                foreground = True

        return "\x1b[" + ";".join(str(c) for c in codes) + "m"

    @classmethod
    def format(cls, style: str | Sequence[str], text: str) -> str:
        names = cls.parse(style)
        if not names:
            return text
        return f"{cls.sgr(names)}{text}{RESET}"
