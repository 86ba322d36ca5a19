from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


LAST_UPDATED_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def parse_last_updated(value: str) -> datetime:
    """Parse a `meta.lastUpdated` value (RFC 3339, `Z` or offset suffix) into an aware datetime."""
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


@dataclass(frozen=True)
class DocumentSpec:
    """Describe where a published JSON document lives."""

    path: str


class JsonDocumentStore:
    """Read and replace a single published JSON document."""

    def __init__(self, spec: DocumentSpec):
        self._spec = spec

    @property
    def path(self) -> str:
        return self._spec.path

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    def load(self) -> dict:
        if not self.exists():
            raise FileNotFoundError(f"No document found at '{self.path}'")
        with open(self.path, "r", encoding="utf-8") as fh:
            return json.load(fh)

    def last_updated(self) -> datetime | None:
        if not self.exists():
            return None
        value = (self.load().get("meta") or {}).get("lastUpdated")
        if not value:
            return None
        try:
            return parse_last_updated(value)
        except ValueError as exc:
            raise ValueError(f"Invalid meta.lastUpdated '{value}' in '{self.path}': {exc}") from exc

    @staticmethod
    def is_up_to_date(last_updated: datetime, freshness_hours: float) -> bool:
        return datetime.now(timezone.utc) - last_updated < timedelta(hours=freshness_hours)

    def write(self, body: dict) -> str:
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        # the published file is only replaced once the new one is complete
        tmp_path = self.path + ".tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as fh:
                json.dump(body, fh, indent=2, ensure_ascii=False)
                fh.write("\n")
            os.replace(tmp_path, self.path)
        finally:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
        return self.path

    def is_fresh(self, freshness_hours: float) -> bool:
        """True when the stored document was updated less than `freshness_hours` ago.

        An unreadable stored document is never fresh, so the page gets scraped again.
        """
        if freshness_hours <= 0:
            return False
        try:
            last_updated = self.last_updated()
        except ValueError as exc:
            logging.warning("Ignoring unreadable document %s: %s", self.path, exc)
            return False
        return last_updated is not None and self.is_up_to_date(last_updated, freshness_hours)
