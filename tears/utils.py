from functools import wraps
from flask import current_app, jsonify, session

from .models.suggestion import SituationContext

CATALOG_KEY = "tears.catalog"
CATALOG_ERROR_KEY = "tears.catalog_error"
SESSION_TAGS_KEY = "context_tags"


def get_catalog():
    """The catalog loaded at startup, or None if loading failed."""
    return current_app.extensions.get(CATALOG_KEY)


def catalog_required(view):
    """Decorator to refuse suggestion views while no valid catalog is loaded."""

    @wraps(view)
    def wrapped(*args, **kwargs):
        if get_catalog() is None:
            error = current_app.extensions.get(CATALOG_ERROR_KEY) or "Suggestion catalog is not loaded."
            return jsonify(error=f"Suggestions are unavailable: {error}"), 503
        return view(*args, **kwargs)

    return wrapped


def get_context() -> SituationContext:
    return SituationContext.of(session.get(SESSION_TAGS_KEY, []))


def store_context(context: SituationContext) -> None:
    session[SESSION_TAGS_KEY] = context.to_list()


def parse_tag_list(raw: str | None) -> list:
    if not raw:
        return []
    return [t.strip() for t in raw.split(",") if t.strip()]
