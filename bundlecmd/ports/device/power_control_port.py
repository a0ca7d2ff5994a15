"""
Power control port interface for device restart and power-off.
"""

from abc import ABC, abstractmethod
from typing import NoReturn


class PowerControlPort(ABC):
    """Port interface for ending the session by restarting or powering off."""

    @abstractmethod
    def power_teardown_and_restart(self) -> NoReturn:
        """Release privileged handles, unmount storage and restart. Does not return."""
        pass

    @abstractmethod
    def power_teardown_and_off(self) -> NoReturn:
        """Release privileged handles, unmount storage and power off. Does not return."""
        pass
