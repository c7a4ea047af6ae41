import json
from flask import current_app


def log_event(event: str, data: dict | None = None) -> None:
    """Writes a single user event to the application log."""
    app = current_app._get_current_object()
    payload = json.dumps(data, sort_keys=True) if data is not None else "{}"
    app.logger.info(f"event={event} data={payload}")
