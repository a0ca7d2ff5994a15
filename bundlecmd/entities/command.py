"""
Command domain entities: tokenized commands, verbs and interpreter context.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Optional


class Verb(Enum):
    """Operation kinds selected by the first token of a command."""

    JSON_DATA = "json_data"
    MAKE_DIR = "make"
    COPY = "copy"
    MIRROR_COPY = "mirror_copy"
    DELETE = "delete"
    MIRROR_DELETE = "mirror_delete"
    MOVE = "move"
    SET_INI_VALUE = "set-ini-val"
    SET_INI_KEY = "set-ini-key"
    HEX_BY_OFFSET = "hex-by-offset"
    HEX_BY_CUSTOM_OFFSET = "hex-by-custom-offset"
    HEX_BY_SWAP = "hex-by-swap"
    HEX_BY_STRING = "hex-by-string"
    HEX_BY_DECIMAL = "hex-by-decimal"
    HEX_BY_RDECIMAL = "hex-by-rdecimal"
    DOWNLOAD = "download"
    UNZIP = "unzip"
    REBOOT = "reboot"
    SHUTDOWN = "shutdown"

    @classmethod
    def lookup(cls, name: str) -> Optional["Verb"]:
        """Resolve a verb token (case-sensitive, aliases included)."""
        return VERB_ALIASES.get(name)

    @property
    def min_args(self) -> int:
        """Minimum number of tokens, verb included, the command needs."""
        return MIN_ARGS[self]

    @property
    def is_destructive(self) -> bool:
        """Whether the source path goes through the path safety gate."""
        return self in (Verb.DELETE, Verb.MOVE)


VERB_ALIASES: dict[str, Verb] = {
    "json_data": Verb.JSON_DATA,
    "make": Verb.MAKE_DIR,
    "mkdir": Verb.MAKE_DIR,
    "copy": Verb.COPY,
    "cp": Verb.COPY,
    "mirror_copy": Verb.MIRROR_COPY,
    "mirror_cp": Verb.MIRROR_COPY,
    "delete": Verb.DELETE,
    "del": Verb.DELETE,
    "mirror_delete": Verb.MIRROR_DELETE,
    "mirror_del": Verb.MIRROR_DELETE,
    "rename": Verb.MOVE,
    "move": Verb.MOVE,
    "mv": Verb.MOVE,
    "set-ini-val": Verb.SET_INI_VALUE,
    "set-ini-value": Verb.SET_INI_VALUE,
    "set-ini-key": Verb.SET_INI_KEY,
    "hex-by-offset": Verb.HEX_BY_OFFSET,
    "hex-by-custom-offset": Verb.HEX_BY_CUSTOM_OFFSET,
    "hex-by-swap": Verb.HEX_BY_SWAP,
    "hex-by-string": Verb.HEX_BY_STRING,
    "hex-by-decimal": Verb.HEX_BY_DECIMAL,
    "hex-by-rdecimal": Verb.HEX_BY_RDECIMAL,
    "download": Verb.DOWNLOAD,
    "unzip": Verb.UNZIP,
    "reboot": Verb.REBOOT,
    "shutdown": Verb.SHUTDOWN,
}

MIN_ARGS: dict[Verb, int] = {
    Verb.JSON_DATA: 2,
    Verb.MAKE_DIR: 2,
    Verb.COPY: 3,
    Verb.MIRROR_COPY: 2,
    Verb.DELETE: 2,
    Verb.MIRROR_DELETE: 2,
    Verb.MOVE: 3,
    Verb.SET_INI_VALUE: 5,
    Verb.SET_INI_KEY: 5,
    Verb.HEX_BY_OFFSET: 4,
    Verb.HEX_BY_CUSTOM_OFFSET: 5,
    Verb.HEX_BY_SWAP: 4,
    Verb.HEX_BY_STRING: 4,
    Verb.HEX_BY_DECIMAL: 4,
    Verb.HEX_BY_RDECIMAL: 4,
    Verb.DOWNLOAD: 3,
    Verb.UNZIP: 3,
    Verb.REBOOT: 0,
    Verb.SHUTDOWN: 0,
}


@dataclass(frozen=True)
class Command:
    """An immutable tokenized command: verb followed by its operands."""

    args: tuple[str, ...]

    @classmethod
    def of(cls, *args: str) -> "Command":
        return cls(tuple(args))

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "Command":
        return cls(tuple(tokens))

    @property
    def verb_name(self) -> str:
        return self.args[0] if self.args else ""

    def __iter__(self) -> Iterator[str]:
        return iter(self.args)

    def __len__(self) -> int:
        return len(self.args)

    def __getitem__(self, index: int) -> str:
        return self.args[index]

    def __str__(self) -> str:
        return " ".join(self.args)


@dataclass
class InterpreterContext:
    """State threaded between the commands of a single execution."""

    data_source_path: str = ""

    @property
    def has_data_source(self) -> bool:
        return bool(self.data_source_path)
