"""GUI platform for password checker adapters."""

from block_check.gui.facade import PasswordCheckerFacade
from block_check.gui.host import GuiHost

__all__ = [
    "GuiHost",
    "PasswordCheckerFacade",
]
