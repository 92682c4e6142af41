from typing import Any, Callable, List, Optional, Tuple

from linediff.cmd_base import Base
from linediff.config import ConfigFile, ConfigValue, ParseError
from linediff.config_stack import ConfigStack

ConfigSource = ConfigFile | ConfigStack


class Config(Base):
    """
    Command for reading linediff options.
    """

    def define_options(self) -> None:
        """Parses command-line options."""
        self.file: Optional[str] = None
        self.get_all = False
        positional_args = []

        args_iter = iter(self.args)
        for arg in args_iter:
            if arg == "--local":
                self.file = "local"
            elif arg == "--global":
                self.file = "global"
            elif arg == "--system":
                self.file = "system"
            elif arg.startswith("--file="):
                self.file = arg.split("=", 1)[1]
            elif arg == "-f":
                self.file = next(args_iter, None)
                if self.file is None:
                    self.eprintln("error: flag -f needs a value")
                    self.exit(129)
            elif arg == "--get-all":
                self.get_all = True
            elif not arg.startswith("-"):
                positional_args.append(arg)

        self.args = positional_args

    def run(self) -> None:
        self.define_options()

        if not self.args:
            self.eprintln("error: you must specify a key")
            self.exit(2)

        key = self._parse_key(self.args[0])

        try:
            if self.get_all:
                self._read_config(lambda config: config.get_all(key))
            else:
                self._read_config(lambda config: config.get(key))
        except ParseError as e:
            self.eprintln(f"error: {e}")
            self.exit(3)

    def _read_config(
        self, operation: Callable[[ConfigSource], ConfigValue | List[Any] | None]
    ) -> None:
        config: ConfigSource = self.config
        if self.file:
            config = self.config.file(self.file)

        config.open()

        result = operation(config)
        values = result if isinstance(result, list) else [result]

        if not values or values == [None]:
            self.exit(1)

        for value in values:
            self.println(str(value).lower() if isinstance(value, bool) else str(value))
        self.exit(0)

    def _parse_key(self, name: str) -> Tuple[str, ...]:
        """Parses and validates a configuration key string."""
        parts = name.split(".")

        if len(parts) < 2:
            self.eprintln(f"error: key does not contain a section: {name}")
            self.exit(2)

        section, *subsection, var = parts

        if not ConfigFile.valid_key((section, var)):
            self.eprintln(f"error: invalid key: {name}")
            self.exit(1)

        if not subsection:
            return section, var
        return section, ".".join(subsection), var
