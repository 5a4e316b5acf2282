"""Interactive commit-msg hook: warning display and the edit/accept/abort loop."""

from .interactive import HookAction, HookController, HookState, parse_reply
from .presenter import WarningPresenter, create_console

__all__ = ["HookAction", "HookController", "HookState", "WarningPresenter", "create_console", "parse_reply"]
