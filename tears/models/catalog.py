import json
import logging
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Optional

from .suggestion import Polarity, SuggestionItem

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 100
ENTRY_KEYS = {"id", "text", "polarity", "tags", "priority", "detail"}


class CatalogError(ValueError):
    """Raised when suggestion data cannot be turned into a valid catalog."""


class Catalog:
    """Read-only set of suggestion items with unique ids."""

    def __init__(self, items: Iterable[SuggestionItem], version: str = "unversioned"):
        by_id = {}
        positions = {}
        for position, item in enumerate(items):
            if item.id in by_id:
                raise CatalogError(
                    f"Duplicate suggestion id {item.id!r} at entries {positions[item.id]} and {position}"
                )
            by_id[item.id] = item
            positions[item.id] = position
        self._by_id = MappingProxyType(by_id)
        self._items = tuple(by_id.values())
        self.version = version

    def __iter__(self) -> Iterator[SuggestionItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id) -> bool:
        return item_id in self._by_id

    def get(self, item_id: str) -> Optional[SuggestionItem]:
        return self._by_id.get(item_id)

    def vocabulary(self) -> list:
        tags = set()
        for item in self._items:
            tags.update(item.tags)
        return sorted(tags)

    def __repr__(self) -> str:
        return f"<Catalog version={self.version!r} items={len(self)}>"


def _entry_error(position: int, entry, message: str) -> CatalogError:
    ident = entry.get("id") if isinstance(entry, Mapping) else None
    where = f"entry {position}" + (f" ({ident!r})" if ident else "")
    return CatalogError(f"Invalid suggestion {where}: {message}")


def _parse_entry(position: int, entry) -> SuggestionItem:
    if not isinstance(entry, Mapping):
        raise _entry_error(position, entry, f"expected an object, got {type(entry).__name__}")

    unknown = set(entry) - ENTRY_KEYS
    if unknown:
        raise _entry_error(position, entry, f"unknown field(s) {', '.join(sorted(unknown))}")

    item_id = entry.get("id")
    if not isinstance(item_id, str) or not item_id.strip():
        raise _entry_error(position, entry, "'id' must be a non-empty string")

    text = entry.get("text")
    if not isinstance(text, str) or not text.strip():
        raise _entry_error(position, entry, "'text' must be a non-empty string")

    polarity = entry.get("polarity")
    if not isinstance(polarity, str):
        raise _entry_error(position, entry, "'polarity' must be 'do' or 'dont'")
    try:
        polarity = Polarity.parse(polarity)
    except ValueError as e:
        raise _entry_error(position, entry, str(e)) from None

    tags = entry.get("tags", [])
    if isinstance(tags, str) or not isinstance(tags, (list, tuple, set, frozenset)):
        raise _entry_error(position, entry, "'tags' must be a list of strings")
    if not all(isinstance(t, str) and t.strip() for t in tags):
        raise _entry_error(position, entry, "'tags' must only contain non-empty strings")

    priority = entry.get("priority", DEFAULT_PRIORITY)
    # bool is an int subclass
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise _entry_error(position, entry, "'priority' must be an integer")

    detail = entry.get("detail")
    if detail is not None and not isinstance(detail, str):
        raise _entry_error(position, entry, "'detail' must be a string")

    return SuggestionItem(
        id=item_id.strip(),
        text=text.strip(),
        polarity=polarity,
        tags=frozenset(t.strip() for t in tags),
        priority=priority,
        detail=detail,
    )


def load_catalog(entries: Iterable, version: str = "unversioned") -> Catalog:
    """
    Build a catalog from a sequence of mappings.

    Every entry is validated before the catalog exists, so a catalog object
    is always safe to select from.
    """
    items = [_parse_entry(position, entry) for position, entry in enumerate(entries)]

    catalog = Catalog(items, version=version)
    logger.info("Loaded suggestion catalog %s with %d items", version, len(catalog))
    return catalog


def load_catalog_file(path) -> Catalog:
    """
    Load a JSON catalog: either a list of entries, or an object with
    "version" and "suggestions" keys.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            document = json.load(fh)
    except OSError as e:
        raise CatalogError(f"Cannot read catalog file {path}: {e}") from e
    except UnicodeDecodeError as e:
        raise CatalogError(f"Catalog file {path} is not valid UTF-8: {e}") from e
    except RecursionError as e:
        raise CatalogError(f"Catalog file {path} is nested too deeply") from e
    except json.JSONDecodeError as e:
        raise CatalogError(f"Catalog file {path} is not valid JSON: {e}") from e

    if isinstance(document, list):
        return load_catalog(document, version=str(path))
    if isinstance(document, Mapping) and isinstance(document.get("suggestions"), list):
        return load_catalog(document["suggestions"], version=str(document.get("version", path)))
    raise CatalogError(
        f"Catalog file {path} must hold a list of suggestions or an object with a 'suggestions' list"
    )
