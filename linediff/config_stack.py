from __future__ import annotations

from pathlib import Path
from typing import MutableMapping, Sequence

from linediff.config import ConfigFile, ConfigValue

GLOBAL_CONFIG = Path("~/.linediffconfig").expanduser()
SYSTEM_CONFIG = Path("/etc/linediffconfig")
LOCAL_CONFIG = Path(".linediff") / "config"


class ConfigStack:
    def __init__(
        self, _dir: Path, env: MutableMapping[str, str] | None = None
    ) -> None:
        self.dir = _dir
        env = env or {}

        if env.get("LINEDIFF_CONFIG"):
            local = Path(env["LINEDIFF_CONFIG"])
        else:
            local = _dir / LOCAL_CONFIG

        self.configs = {
            "local": ConfigFile(local),
            "global": ConfigFile(GLOBAL_CONFIG),
            "system": ConfigFile(SYSTEM_CONFIG),
        }

    def file(self, name: str) -> ConfigFile:
        return self.configs.get(name) or ConfigFile(self.dir / name)

    def open(self) -> None:
        for cfg in self.configs.values():
            cfg.open()

    def get(self, key: Sequence[str]) -> ConfigValue | None:
        try:
            return self.get_all(key)[-1]
        except IndexError:
            return None

    def get_all(self, key: Sequence[str]) -> list[ConfigValue]:
        values: list[ConfigValue] = []
        for name in ("system", "global", "local"):
            cfg = self.configs[name]
            cfg.open()
            values.extend(cfg.get_all(key))
        return values
