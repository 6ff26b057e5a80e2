import json
import os
import tempfile
import time
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

from nanoid import generate

from app.models import Draft
from app.settings import Settings

DRAFTS_KEY = "distill_drafts"
EDITABLE_FIELDS = {"content", "output_format", "summary"}

ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def now_ms() -> int:
    return int(time.time() * 1000)


def _base36(n: int) -> str:
    digits = ""
    while True:
        n, r = divmod(n, 36)
        digits = ALPHABET[r] + digits
        if n == 0:
            return digits


def generate_draft_id(timestamp_ms: int) -> str:
    # random prefix + time suffix keeps ids unique within one store
    return generate(size=10, alphabet=ALPHABET) + _base36(timestamp_ms)


class MemoryStorage:
    """Key/value blob storage kept in process memory."""

    def __init__(self) -> None:
        self.items: Dict[str, str] = {}

    def get_item(self, key: str) -> Optional[Any]:
        raw = self.items.get(key)
        return json.loads(raw) if raw is not None else None

    def set_item(self, key: str, value: Any) -> None:
        self.items[key] = json.dumps(value)


class JsonFileStorage:
    """Key/value blob storage persisted as a single JSON document on disk.

    Every write replaces the whole file atomically, so a reader never sees a
    partially written document.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        with self.path.open("r", encoding="utf-8") as f:
            return json.load(f)

    def get_item(self, key: str) -> Optional[Any]:
        return self._read().get(key)

    def set_item(self, key: str, value: Any) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=self.path.name, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f)
            os.replace(tmp, self.path)
        except BaseException:
            os.unlink(tmp)
            raise


class DraftStore:
    """Ordered, newest-first list of drafts stored under one key."""

    def __init__(self, storage, key: str = DRAFTS_KEY, clock: Callable[[], int] = now_ms) -> None:
        self.storage = storage
        self.key = key
        self.clock = clock

    @classmethod
    def from_settings(cls, settings: Settings) -> "DraftStore":
        return cls(JsonFileStorage(settings.drafts_path))

    def list(self) -> List[Draft]:
        raw = self.storage.get_item(self.key) or []
        return [Draft.model_validate(d) for d in raw]

    def get(self, draft_id: str) -> Optional[Draft]:
        return next((d for d in self.list() if d.id == draft_id), None)

    def _save(self, drafts: List[Draft]) -> None:
        self.storage.set_item(
            self.key, [d.model_dump(by_alias=True, exclude_none=True) for d in drafts]
        )

    def create(self, content: str, output_format: str, summary: str | None = None) -> Draft:
        ts = self.clock()
        draft = Draft(
            id=generate_draft_id(ts),
            content=content,
            output_format=output_format,
            summary=summary,
            updated_at=ts,
        )
        self._save([draft, *self.list()])
        return draft

    def update(self, draft_id: str, **patch: Any) -> bool:
        """Merge ``patch`` into a draft and refresh its timestamp.

        Only fields passed are touched, so ``summary=None`` clears a cached
        result while omitting it keeps the old one.

        Raises:
            TypeError: If ``patch`` names a field that cannot be edited.
        """
        unknown = set(patch) - EDITABLE_FIELDS
        if unknown:
            raise TypeError(f"Cannot update draft fields: {', '.join(sorted(unknown))}")

        drafts = self.list()
        for i, d in enumerate(drafts):
            if d.id != draft_id:
                continue
            merged = {**d.model_dump(), **patch, "updated_at": self.clock()}
            drafts[i] = Draft.model_validate(merged)
            self._save(drafts)
            return True
        return False

    def delete(self, draft_id: str) -> bool:
        drafts = self.list()
        kept = [d for d in drafts if d.id != draft_id]
        if len(kept) == len(drafts):
            return False
        self._save(kept)
        return True


def format_relative_time(timestamp_ms: int, now: int | None = None) -> str:
    """Render a draft timestamp as "N minutes ago", "N hours ago" or a date."""
    current = now if now is not None else now_ms()
    diff = max(current - timestamp_ms, 0)

    if diff < 24 * 3600 * 1000:
        if diff < 3600 * 1000:
            minutes = diff // 60000
            return f"{minutes} minute{'' if minutes == 1 else 's'} ago"
        hours = diff // (3600 * 1000)
        return f"{hours} hour{'' if hours == 1 else 's'} ago"

    date = datetime.fromtimestamp(timestamp_ms / 1000)
    label = f"{date:%b} {date.day}"
    if date.year != datetime.fromtimestamp(current / 1000).year:
        label += f", {date.year}"
    return label
