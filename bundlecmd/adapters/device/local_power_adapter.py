import logging
import shlex
import subprocess
from typing import Callable, NoReturn, Optional

from typing_extensions import override

from bundlecmd.exceptions import DeviceControlError
from bundlecmd.ports.device.power_control_port import PowerControlPort

Teardown = Callable[[], None]


class LocalPowerAdapter(PowerControlPort):
    def __init__(
        self,
        reboot_command: str = "",
        shutdown_command: str = "",
        runner: Callable[..., object] = subprocess.run,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._reboot_command = reboot_command
        self._shutdown_command = shutdown_command
        self._runner = runner
        self._teardowns: list[tuple[str, Teardown]] = []
        self._logger = logger or logging.getLogger(__name__)

    def register_teardown(self, name: str, callback: Teardown) -> None:
        """Register a handle release step, run in registration order before power changes."""
        self._teardowns.append((name, callback))

    def _teardown(self) -> None:
        for name, callback in self._teardowns:
            try:
                callback()
                self._logger.info(f"Released {name}")
            except Exception as e:
                # Remaining handles are still released
                self._logger.error(f"Failed to release {name}: {e}")

    def _run(self, command: str, action: str) -> None:
        if not command:
            self._logger.info(f"No {action} command configured")
            return
        try:
            self._runner(shlex.split(command), check=True)
        except Exception as e:
            self._logger.error(f"Failed to {action}: {e}")
            raise DeviceControlError(f"Failed to {action}: {e}")

    @override
    def power_teardown_and_restart(self) -> NoReturn:
        self._teardown()
        self._run(self._reboot_command, "reboot")
        self._logger.info("Restart requested, exiting")
        raise SystemExit(0)

    @override
    def power_teardown_and_off(self) -> NoReturn:
        self._teardown()
        self._run(self._shutdown_command, "shut down")
        self._logger.info("Power-off requested, exiting")
        raise SystemExit(0)
