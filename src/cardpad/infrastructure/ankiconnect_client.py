"""AnkiConnect JSON-over-HTTP client."""

from typing import Any

import httpx
import structlog

from cardpad.exceptions import ProtocolError, TransportError

logger = structlog.get_logger(__name__)

UNREACHABLE_HINT = "is Anki running with AnkiConnect?"


class AnkiConnectClient:
    """Synchronous client for the AnkiConnect add-on.

    Every call is one blocking POST of ``{action, version, params}``; the
    reply must be ``{result, error}``. There are no retries.
    """

    def __init__(
        self,
        base_url: str,
        api_version: int = 5,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.api_version = api_version
        self._client = httpx.Client(timeout=timeout, transport=transport)

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "AnkiConnectClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _post(self, action: str, payload: dict[str, Any]) -> httpx.Response:
        try:
            response = self._client.post(self.base_url, json=payload)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"{action}: service answered HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise TransportError(f"{action}: request failed ({UNREACHABLE_HINT}): {e}") from e
        return response

    def request(self, action: str, **params: Any) -> Any:
        """
        Invoke an AnkiConnect action and return its ``result``.

        Raises:
            TransportError: If the service is unreachable or replies with nothing
            ProtocolError: If the reply is not a ``{result, error}`` object or
                carries a non-null ``error``
        """
        payload = {"action": action, "version": self.api_version, "params": params}
        logger.debug("ankiconnect_request", action=action, url=self.base_url)

        response = self._post(action, payload)
        if not response.content.strip():
            raise TransportError(f"{action}: empty response ({UNREACHABLE_HINT})")

        try:
            body = response.json()
        except ValueError as e:
            raise ProtocolError(f"{action}: failed to parse JSON response: {e}", action) from e

        if not isinstance(body, dict):
            raise ProtocolError(f"{action}: response is not a JSON object", action)
        if "error" not in body:
            raise ProtocolError(f"{action}: response is missing required error field", action)
        if "result" not in body:
            raise ProtocolError(f"{action}: response is missing required result field", action)
        if body["error"] is not None:
            logger.info("ankiconnect_error", action=action, error=body["error"])
            raise ProtocolError(f"{action}: {body['error']}", action)

        return body["result"]

    def _names(self, action: str, **params: Any) -> list[str]:
        result = self.request(action, **params)
        if not isinstance(result, list):
            raise ProtocolError(f"{action}: expected a list of names, got {result!r}", action)
        return [str(name) for name in result]

    # --- Schema lookups ---

    def model_field_names(self, model_name: str) -> list[str]:
        """Field names of a note type, in schema order."""
        return self._names("modelFieldNames", modelName=model_name)

    def model_names(self) -> list[str]:
        """All note type names."""
        return self._names("modelNames")

    def deck_names(self) -> list[str]:
        """All deck names, with ``::`` separating nested decks."""
        return self._names("deckNames")

    # --- Notes ---

    def add_note(
        self,
        deck_name: str,
        model_name: str,
        fields: dict[str, str],
        tags: list[str] | None = None,
    ) -> int:
        """Add a note and return its id."""
        note = {
            "deckName": deck_name,
            "modelName": model_name,
            "fields": fields,
            "tags": tags or [],
        }
        note_id = self.request("addNote", note=note)
        logger.info("note_added", note_id=note_id, deck=deck_name, model=model_name)
        return note_id
