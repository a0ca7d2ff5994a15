"""
Use case for interpreting and executing a list of tokenized commands.
"""

import logging
from typing import Callable, Iterable, Optional, Sequence

from bundlecmd.entities.command import InterpreterContext, Verb
from bundlecmd.exceptions import HexEditError
from bundlecmd.ports.config.ini_store_port import IniStorePort
from bundlecmd.ports.device.power_control_port import PowerControlPort
from bundlecmd.ports.files.file_operations_port import FileOperationsPort
from bundlecmd.ports.hex.hex_editor_port import HexEditorPort
from bundlecmd.ports.network.network_port import NetworkPort
from bundlecmd.ports.paths.path_resolver_port import PathResolverPort
from bundlecmd.utils.hex_encoding import (
    ascii_to_hex,
    decimal_to_hex,
    decimal_to_hex_reversed,
    pad_hex_pair,
    remove_quotes,
)
from bundlecmd.utils.path_safety import first_violation

PLACEHOLDER_MARKER = "{json_data("
WILDCARD = "*"

Handler = Callable[[list[str], InterpreterContext], None]


class ExecuteCommandsUseCase:
    """
    Dispatch commands to filesystem, config, patch, network and power collaborators.

    Commands run strictly in order. Empty commands, unknown verbs and commands
    with too few arguments are skipped; delete and move targets that fail the
    path safety gate are skipped. Collaborator errors propagate unchanged.
    """

    def __init__(
        self,
        path_resolver: PathResolverPort,
        file_operations: FileOperationsPort,
        ini_store: IniStorePort,
        hex_editor: HexEditorPort,
        network: NetworkPort,
        power_control: PowerControlPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            path_resolver: Operand normalization and placeholder resolution
            file_operations: Filesystem primitives
            ini_store: Key/value config file editor
            hex_editor: Binary patch engine
            network: Downloads and archive extraction
            power_control: Device restart / power-off
            logger: Logger instance to use for logging
        """
        self._paths = path_resolver
        self._files = file_operations
        self._ini = ini_store
        self._hex = hex_editor
        self._network = network
        self._power = power_control
        self._logger = logger or logging.getLogger(__name__)
        self._handlers: dict[Verb, Handler] = {
            Verb.JSON_DATA: self._json_data,
            Verb.MAKE_DIR: self._make_dir,
            Verb.COPY: self._copy,
            Verb.MIRROR_COPY: self._mirror_copy,
            Verb.DELETE: self._delete,
            Verb.MIRROR_DELETE: self._mirror_delete,
            Verb.MOVE: self._move,
            Verb.SET_INI_VALUE: self._set_ini_value,
            Verb.SET_INI_KEY: self._set_ini_key,
            Verb.HEX_BY_OFFSET: self._hex_by_offset,
            Verb.HEX_BY_CUSTOM_OFFSET: self._hex_by_custom_offset,
            Verb.HEX_BY_SWAP: self._hex_by_swap,
            Verb.HEX_BY_STRING: self._hex_by_string,
            Verb.HEX_BY_DECIMAL: self._hex_by_decimal,
            Verb.HEX_BY_RDECIMAL: self._hex_by_rdecimal,
            Verb.DOWNLOAD: self._download,
            Verb.UNZIP: self._unzip,
            Verb.REBOOT: self._reboot,
            Verb.SHUTDOWN: self._shutdown,
        }

    def execute(self, commands: Iterable[Sequence[str]]) -> None:
        """
        Execute a command list.

        Args:
            commands: Tokenized commands, each a verb followed by its operands
        """
        context = InterpreterContext()
        for command in commands:
            self._execute_one(command, context)

    def _execute_one(self, command: Sequence[str], context: InterpreterContext) -> None:
        if not command:
            return

        verb_name = command[0]
        args = self._substitute_placeholders(command, context)

        verb = Verb.lookup(verb_name)
        if verb is None:
            self._logger.debug(f"Ignoring unknown command: {verb_name}")
            return
        if len(args) < verb.min_args:
            self._logger.debug(
                f"Ignoring '{verb_name}': expected at least {verb.min_args} arguments, got {len(args)}"
            )
            return

        self._logger.info(f"Executing command: {verb_name}")
        self._handlers[verb](args, context)

    def _substitute_placeholders(
        self, command: Sequence[str], context: InterpreterContext
    ) -> list[str]:
        # Always a fresh list; the caller's command is never modified
        if not context.has_data_source:
            return list(command)
        return [
            self._paths.resolve_placeholder(arg, context.data_source_path)
            if PLACEHOLDER_MARKER in arg
            else arg
            for arg in command
        ]

    def _is_rejected(self, verb_name: str, path: str) -> bool:
        rule = first_violation(path)
        if rule is not None:
            self._logger.warning(f"Refusing '{verb_name}' on {path}: {rule}")
            return True
        return False

    @staticmethod
    def _join_tail(args: list[str], start: int) -> str:
        return " ".join(args[start:])

    @staticmethod
    def _occurrence(args: list[str]) -> Optional[str]:
        return remove_quotes(args[4]) if len(args) >= 5 else None

    # ---------------- filesystem ----------------
    def _json_data(self, args: list[str], context: InterpreterContext) -> None:
        context.data_source_path = self._paths.preprocess_path(args[1])

    def _make_dir(self, args: list[str], context: InterpreterContext) -> None:
        self._files.create_dir(self._paths.preprocess_path(args[1]))

    def _copy(self, args: list[str], context: InterpreterContext) -> None:
        source = self._paths.preprocess_path(args[1])
        destination = self._paths.preprocess_path(args[2])
        if WILDCARD in source:
            self._files.copy_by_pattern(source, destination)
        else:
            self._files.copy(source, destination)

    def _mirror_copy(self, args: list[str], context: InterpreterContext) -> None:
        source = self._paths.preprocess_path(args[1])
        if len(args) >= 3:
            self._files.mirror_copy(source, self._paths.preprocess_path(args[2]))
        else:
            self._files.mirror_copy(source)

    def _delete(self, args: list[str], context: InterpreterContext) -> None:
        target = self._paths.preprocess_path(args[1])
        if self._is_rejected(args[0], target):
            return
        if WILDCARD in target:
            self._files.delete_by_pattern(target)
        else:
            self._files.delete(target)

    def _mirror_delete(self, args: list[str], context: InterpreterContext) -> None:
        # TODO: route mirror deletes through the path safety gate once existing
        # packages relying on sdmc:/-rooted mirror trees have been audited.
        source = self._paths.preprocess_path(args[1])
        if len(args) >= 3:
            self._files.mirror_delete(source, self._paths.preprocess_path(args[2]))
        else:
            self._files.mirror_delete(source)

    def _move(self, args: list[str], context: InterpreterContext) -> None:
        source = self._paths.preprocess_path(args[1])
        destination = self._paths.preprocess_path(args[2])
        if self._is_rejected(args[0], source):
            return
        if WILDCARD in source:
            self._files.move_by_pattern(source, destination)
        else:
            self._files.move(source, destination)

    # ---------------- ini ----------------
    def _set_ini_value(self, args: list[str], context: InterpreterContext) -> None:
        self._ini.set_value(
            self._paths.preprocess_path(args[1]),
            remove_quotes(args[2]),
            remove_quotes(args[3]),
            self._join_tail(args, 4),
        )

    def _set_ini_key(self, args: list[str], context: InterpreterContext) -> None:
        self._ini.rename_key(
            self._paths.preprocess_path(args[1]),
            remove_quotes(args[2]),
            remove_quotes(args[3]),
            self._join_tail(args, 4),
        )

    # ---------------- hex ----------------
    def _hex_by_offset(self, args: list[str], context: InterpreterContext) -> None:
        self._hex.patch_at_offset(
            self._paths.preprocess_path(args[1]),
            remove_quotes(args[2]),
            remove_quotes(args[3]),
        )

    def _hex_by_custom_offset(
        self, args: list[str], context: InterpreterContext
    ) -> None:
        self._hex.patch_at_pattern_offset(
            self._paths.preprocess_path(args[1]),
            remove_quotes(args[2]),
            remove_quotes(args[3]),
            remove_quotes(args[4]),
        )

    def _find_replace(self, args: list[str], search_hex: str, replacement_hex: str) -> None:
        path = self._paths.preprocess_path(args[1])
        occurrence = self._occurrence(args)
        if occurrence is None:
            self._hex.find_replace(path, search_hex, replacement_hex)
        else:
            self._hex.find_replace(path, search_hex, replacement_hex, occurrence)

    def _hex_by_swap(self, args: list[str], context: InterpreterContext) -> None:
        self._find_replace(args, remove_quotes(args[2]), remove_quotes(args[3]))

    def _hex_by_string(self, args: list[str], context: InterpreterContext) -> None:
        search_hex, replacement_hex = pad_hex_pair(
            ascii_to_hex(remove_quotes(args[2])),
            ascii_to_hex(remove_quotes(args[3])),
        )
        self._find_replace(args, search_hex, replacement_hex)

    @staticmethod
    def _decimal_operand(encode: Callable[[str], str], operand: str) -> str:
        try:
            return encode(remove_quotes(operand))
        except ValueError as e:
            raise HexEditError(f"Invalid decimal value {operand!r}: {e}")

    def _hex_by_decimal(self, args: list[str], context: InterpreterContext) -> None:
        self._find_replace(
            args,
            self._decimal_operand(decimal_to_hex, args[2]),
            self._decimal_operand(decimal_to_hex, args[3]),
        )

    def _hex_by_rdecimal(self, args: list[str], context: InterpreterContext) -> None:
        self._find_replace(
            args,
            self._decimal_operand(decimal_to_hex_reversed, args[2]),
            self._decimal_operand(decimal_to_hex_reversed, args[3]),
        )

    # ---------------- network ----------------
    def _download(self, args: list[str], context: InterpreterContext) -> None:
        url = self._paths.preprocess_url(args[1])
        destination = self._paths.preprocess_path(args[2])
        self._logger.info(f"Downloading {url} to {destination}")
        self._network.download(url, destination)

    def _unzip(self, args: list[str], context: InterpreterContext) -> None:
        self._network.unzip(
            self._paths.preprocess_path(args[1]),
            self._paths.preprocess_path(args[2]),
        )

    # ---------------- power ----------------
    def _reboot(self, args: list[str], context: InterpreterContext) -> None:
        self._power.power_teardown_and_restart()

    def _shutdown(self, args: list[str], context: InterpreterContext) -> None:
        self._power.power_teardown_and_off()
