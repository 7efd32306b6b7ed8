"""Persistent crossword document store.

Every saved generation is written as a JSON document under
``local_db/crosswords/``. Documents carry the configuration, the full result
and its stats, ready for a renderer or exporter to pick up.
"""

from __future__ import annotations

import json
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from ..core.exceptions import StoreError
from ..utils.logger import get_logger
from ..utils.pretty import compute_stats

if TYPE_CHECKING:
    from .generator import CrosswordResult, GeneratorConfig


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/crosswords")


class CrosswordStore:
    """Save crossword generation results as structured JSON documents."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)

    def save(self, result: "CrosswordResult", config: Optional["GeneratorConfig"] = None) -> str:
        """Persist ``result`` and return its document ID."""
        doc_id = self._new_id()
        doc = {
            "id": doc_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "config": self._serialize_config(config),
            "result": result.to_jsonable(),
            "stats": compute_stats(result),
        }
        path = self.store_dir / f"{doc_id}.json"
        try:
            self.store_dir.mkdir(parents=True, exist_ok=True)
            path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"Cannot write crossword document {path}: {exc}") from exc
        LOGGER.info("Crossword saved: %s", doc_id)
        return doc_id

    def load(self, doc_id: str) -> dict:
        path = self.store_dir / f"{doc_id}.json"
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise StoreError(f"Cannot read crossword document {path}: {exc}") from exc

    @staticmethod
    def _serialize_config(config: Optional["GeneratorConfig"]) -> Optional[dict]:
        if config is None:
            return None
        return {
            "max_attempts": config.max_attempts,
            "seed": config.seed,
            "top_candidates": config.top_candidates,
        }

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"{ts}_{short_uuid}"
