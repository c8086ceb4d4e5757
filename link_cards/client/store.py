from __future__ import annotations

import logging
from typing import List, Optional

from pydantic import ValidationError as SchemaValidationError

from link_cards.client.gateway import GatewayClient
from link_cards.client.storage import NAME_KEY, PREVIEWS_KEY, StoragePort
from link_cards.errors import (
    LinkCardsError,
    NameRequiredError,
    ParseError,
    PersistenceError,
    RecordIndexError,
)
from link_cards.schemas import PREVIEW_FIELDS, PreviewList, PreviewRecord

logger = logging.getLogger(__name__)


def load_previews(storage: StoragePort) -> List[PreviewRecord]:
    """Read the stored collection. Raises ``ParseError`` if it is corrupt."""
    raw = storage.get_item(PREVIEWS_KEY)
    if raw is None:
        return []
    try:
        return PreviewList.validate_json(raw)
    except SchemaValidationError as exc:
        raise ParseError(f"Stored previews are not valid: {exc.error_count()} error(s)") from exc


def save_previews(storage: StoragePort, previews: List[PreviewRecord]) -> None:
    storage.set_item(PREVIEWS_KEY, PreviewList.dump_json(previews).decode("utf-8"))


class PreviewStore:
    """Owns one session's preview cards and mirrors them to local storage.

    The collection is written back in full after every mutation. Records
    are addressed by position; adding always appends to the end.
    """

    def __init__(
        self,
        storage: StoragePort,
        gateway: GatewayClient,
        name: Optional[str] = None,
        previews: Optional[List[PreviewRecord]] = None,
        load_error: Optional[PersistenceError] = None,
    ) -> None:
        self.storage = storage
        self.gateway = gateway
        self.name = name or ""
        self.awaiting_name = not name
        self.previews: List[PreviewRecord] = list(previews or [])
        self.load_error = load_error
        self.url_input = ""
        self.busy = False
        self.last_error: Optional[str] = None

    @classmethod
    def load(cls, storage: StoragePort, gateway: GatewayClient) -> "PreviewStore":
        load_error = None
        try:
            name = storage.get_item(NAME_KEY)
        except PersistenceError as exc:
            logger.warning("Treating stored name as absent: %s", exc)
            name = None
            load_error = exc
        try:
            previews = load_previews(storage)
        except PersistenceError as exc:
            logger.warning("Starting with no previews: %s", exc)
            previews = []
            load_error = exc
        return cls(storage, gateway, name=name, previews=previews, load_error=load_error)

    @property
    def greeting(self) -> str:
        if self.name:
            return f"Welcome, {self.name}!"
        return "Welcome to Link Preview"

    def submit_name(self, name: str) -> None:
        self.name = name
        self.storage.set_item(NAME_KEY, name)
        self.awaiting_name = False

    async def add_preview(self, url: Optional[str] = None) -> Optional[PreviewRecord]:
        """Fetch a preview for ``url`` (or the current input) and append it.

        Returns the new record, or ``None`` if the fetch failed or another
        add is still in flight. Failures are recorded in ``last_error``.
        """
        if self.awaiting_name:
            raise NameRequiredError("Submit a name before adding previews")
        if self.busy:
            logger.info("Ignoring add while a preview fetch is in flight")
            return None

        target = self.url_input if url is None else url
        self.busy = True
        try:
            record = await self.gateway.fetch_preview(target)
        except LinkCardsError as exc:
            logger.error("Error fetching link preview for %s: %s", target, exc)
            self.last_error = str(exc)
            return None
        finally:
            self.busy = False

        self.previews.append(record)
        self._persist()
        self.url_input = ""
        self.last_error = None
        return record

    def edit_preview(self, index: int, **fields: str) -> PreviewRecord:
        self._check_index(index)
        unknown = set(fields) - set(PREVIEW_FIELDS)
        if unknown:
            raise ValueError(f"Unknown preview field(s): {', '.join(sorted(unknown))}")

        updated = PreviewRecord.model_validate(
            {**self.previews[index].model_dump(), **fields}
        )
        self.previews[index] = updated
        self._persist()
        return updated

    def delete_preview(self, index: int) -> PreviewRecord:
        self._check_index(index)
        removed = self.previews.pop(index)
        self._persist()
        return removed

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.previews):
            raise RecordIndexError(f"No preview at index {index}")

    def _persist(self) -> None:
        save_previews(self.storage, self.previews)
