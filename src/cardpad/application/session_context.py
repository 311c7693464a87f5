"""Last-used card type and deck, remembered across editor commands."""

from pathlib import Path

import structlog
from pydantic import BaseModel, ValidationError

logger = structlog.get_logger(__name__)


class SessionContext(BaseModel):
    """
    The user's most recent card type and deck.

    One instance lives for the whole editing session and is handed to the
    card editor service. Every successful open or send overwrites it. The
    CLI persists it between invocations with ``load``/``save``.
    """

    last_model: str | None = None
    last_deck: str | None = None

    def remember(self, model: str | None = None, deck: str | None = None) -> None:
        """Overwrite whichever of model/deck is given."""
        if model is not None:
            self.last_model = model
        if deck is not None:
            self.last_deck = deck

    @classmethod
    def load(cls, path: Path) -> "SessionContext":
        """Read a saved context; missing or unreadable files give an empty one."""
        try:
            return cls.model_validate_json(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return cls()
        except (OSError, ValidationError) as e:
            logger.warning("session_state_unreadable", path=str(path), error=str(e))
            return cls()

    def save(self, path: Path) -> None:
        """Write the context as JSON, creating parent directories."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2), encoding="utf-8")
