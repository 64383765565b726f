from flask import Blueprint, jsonify, request, current_app

from datepicker_app.functions import format_date, is_empty, normalize_date

api_bp = Blueprint('datepicker_api', __name__)


@api_bp.route("/parse", methods=["GET"])
def parse_date():
    """Normalize a typed date the same way the date picker field does"""
    value = request.args.get("value")
    if value is None:
        return jsonify({"success": False, "error": "Missing 'value' parameter"}), 400

    normalized = normalize_date(value)
    current_app.logger.debug(f"Parsed {value!r} as {normalized.value}")

    return jsonify({
        "success": True,
        "raw": normalized.raw,
        "date": normalized.value.isoformat() if normalized.value else None,
        "formatted": format_date(normalized.value) if normalized.value else None,
        "valid": is_empty(normalized.raw) or normalized.value is not None,
        "filled": not is_empty(normalized.raw),
    })
