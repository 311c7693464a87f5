"""Application layer: editor commands built on the card domain."""

from .card_editor_service import CardEditorService
from .commands import CommandDispatcher, Notification
from .session_context import SessionContext

__all__ = ["CardEditorService", "CommandDispatcher", "Notification", "SessionContext"]
