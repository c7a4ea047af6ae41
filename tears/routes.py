from io import BytesIO
import pandas as pd
from flask import Blueprint, Response, current_app, jsonify, request, send_file

from .logger import log_event
from .models.descriptors import Mood, Trust, UnknownDescriptor, situation_for
from .models.suggestion import SituationContext
from .suggestion_engine import explain, select
from .utils import (
    CATALOG_ERROR_KEY, catalog_required, get_catalog, get_context,
    parse_tag_list, store_context,
)

bp = Blueprint("main", __name__)


# ------------------------------
# Response Helper Functions
# ------------------------------
def serialize_result(result, context):
    """Turn a selection result into JSON-ready lists, with the tags that matched."""
    def entry(item):
        data = item.to_dict()
        data["matched_tags"] = list(explain(item, context) or ())
        return data

    return {
        "do": [entry(i) for i in result.do],
        "dont": [entry(i) for i in result.dont],
    }


def context_response(context):
    """Recompute the suggestions for `context` and return both."""
    result = select(get_catalog(), context)
    return jsonify(context=context.to_list(), suggestions=serialize_result(result, context))


# ------------------------------
# Status & Vocabulary Routes
# ------------------------------

@bp.route("/health", methods=["GET"])
def health():
    """Reports whether the suggestion catalog is usable."""
    catalog = get_catalog()
    if catalog is None:
        return jsonify(status="unavailable", error=current_app.extensions.get(CATALOG_ERROR_KEY)), 503
    return jsonify(status="ok", catalog_version=catalog.version, catalog_size=len(catalog))


@bp.route("/moods", methods=["GET"])
def moods():
    return jsonify(moods=[m.to_dict() for m in Mood])


@bp.route("/trust", methods=["GET"])
def trust_levels():
    return jsonify(trust=[t.to_dict() for t in Trust])


@bp.route("/tags", methods=["GET"])
@catalog_required
def tags():
    return jsonify(tags=get_catalog().vocabulary())


# ------------------------------
# Session Context Routes
# ------------------------------

@bp.route("/context", methods=["GET"])
def show_context():
    return jsonify(context=get_context().to_list())


@bp.route("/context/toggle", methods=["POST"])
@catalog_required
def toggle_tag():
    """Toggles one tag in the session context and returns the new suggestions."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    tag = payload.get("tag")
    if not isinstance(tag, str) or not tag.strip():
        return jsonify(error="A non-empty 'tag' is required."), 400

    context = get_context().toggle(tag.strip())
    store_context(context)
    log_event("context_toggle", data={"tag": tag.strip(), "selected": tag.strip() in context})
    return context_response(context)


@bp.route("/context", methods=["PUT"])
@catalog_required
def set_situation():
    """Replaces the session context with a trust / mood selection."""
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}
    try:
        trust = Trust.parse(payload["trust"]) if payload.get("trust") is not None else None
        mood = Mood.parse(payload["mood"]) if payload.get("mood") is not None else None
    except UnknownDescriptor as e:
        return jsonify(error=str(e)), 400

    context = situation_for(trust, mood)
    store_context(context)
    log_event("context_set", data={
        "trust": trust.value if trust else None,
        "mood": mood.tag if mood else None,
    })
    return context_response(context)


@bp.route("/context", methods=["DELETE"])
@catalog_required
def clear_context():
    context = SituationContext()
    store_context(context)
    log_event("context_clear")
    return context_response(context)


@bp.route("/suggestions", methods=["GET"])
@catalog_required
def suggestions():
    """Suggestions for the session context, or for ?tags=a,b without touching the session."""
    if "tags" in request.args:
        context = SituationContext.of(parse_tag_list(request.args.get("tags")))
    else:
        context = get_context()
    return context_response(context)


# ------------------------------
# Export Routes
# ------------------------------

@bp.route("/catalog/export/<export_format>", methods=["GET"])
@catalog_required
def export_catalog(export_format):
    """Exports the suggestion catalog to CSV or Excel."""
    if export_format not in ("csv", "excel"):
        return jsonify(error=f"Invalid format: {export_format}"), 400

    catalog = get_catalog()
    data_for_df = [
        {
            "id": item.id,
            "polarity": item.polarity.value,
            "priority": item.priority,
            "tags": ", ".join(sorted(item.tags)),
            "text": item.text,
            "detail": item.detail or "",
        } for item in sorted(catalog, key=lambda i: i.id)
    ]
    df = pd.DataFrame(data_for_df, columns=["id", "polarity", "priority", "tags", "text", "detail"])
    log_event("catalog_export", data={"format": export_format, "version": catalog.version})

    if export_format == "csv":
        return Response(df.to_csv(index=False), mimetype="text/csv",
                        headers={"Content-Disposition": "attachment;filename=tears_catalog.csv"})

    output = BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name="Suggestions")
    output.seek(0)
    return send_file(output, mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
                     as_attachment=True, download_name="tears_catalog.xlsx")
