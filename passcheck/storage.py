"""Key/value persistence for generated wordlists."""

import json
import logging
import os
import tempfile
from typing import Dict, Iterable, List, Optional, Protocol


logger = logging.getLogger(__name__)

STORAGE_KEY = "generated_passwords"
DEFAULT_STORE_PATH = "passcheck_store.json"
DEFAULT_EXPORT_NAME = "passcheck_wordlist.txt"


class KeyValueStore(Protocol):
    def put(self, key: str, value: str) -> None:
        ...

    def get(self, key: str) -> Optional[str]:
        ...


class MemoryStore:
    def __init__(self) -> None:
        self.items: Dict[str, str] = {}

    def put(self, key: str, value: str) -> None:
        self.items[key] = value

    def get(self, key: str) -> Optional[str]:
        return self.items.get(key)


class JsonFileStore:
    """All keys live in one JSON object file; every put rewrites it whole."""

    def __init__(self, path: str = DEFAULT_STORE_PATH) -> None:
        self.path = path

    def _read(self) -> Dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as handle:
                loaded = json.load(handle)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable store %s: %s", self.path, exc)
            return {}
        if not isinstance(loaded, dict):
            logger.warning("Ignoring store %s: top level is not an object", self.path)
            return {}
        return {k: v for k, v in loaded.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def put(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(prefix=".passcheck-", suffix=".tmp", dir=directory)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as handle:
                    json.dump(items, handle)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as exc:
            raise RuntimeError(f"Filesystem error: {exc}") from exc


def save_wordlist(store: KeyValueStore, words: Iterable[str], key: str = STORAGE_KEY) -> None:
    store.put(key, json.dumps(list(words)))


def load_wordlist(store: KeyValueStore, key: str = STORAGE_KEY) -> List[str]:
    """Stored wordlist, or an empty list when it is missing or unreadable."""
    raw = store.get(key)
    if raw is None:
        return []
    try:
        loaded = json.loads(raw)
    except ValueError as exc:
        logger.warning("Failed to parse stored wordlist under %r: %s", key, exc)
        return []
    if not isinstance(loaded, list):
        logger.warning("Stored value under %r is not a list", key)
        return []
    return [item for item in loaded if isinstance(item, str)]


def export_text(words: Iterable[str]) -> str:
    return "\n".join(words)


def write_export(words: Iterable[str], path: str = DEFAULT_EXPORT_NAME) -> None:
    try:
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.write(export_text(words))
    except OSError as exc:
        raise RuntimeError(f"Filesystem error: {exc}") from exc
