# date_code_routes.py
from datetime import date

import bleach
import markdown
from flask import Blueprint, current_app, jsonify, render_template, request

from countries import FACTORY_LOCATIONS
from decoders import ERAS, decode_date_code
from encoders import (
    encode_1990,
    encode_1990_from_date,
    encode_early1980,
    encode_early1980_from_date,
    encode_late1980,
    encode_late1980_from_date,
    encode_post2007,
    encode_post2007_from_date,
)
from errors import DateCodeError, FormatError, InvalidArgumentError

# era -> (component encoder, date encoder, takes factory code, period field)
_ENCODERS = {
    "early1980": (encode_early1980, encode_early1980_from_date, False, "month"),
    "late1980": (encode_late1980, encode_late1980_from_date, True, "month"),
    "1990": (encode_1990, encode_1990_from_date, True, "month"),
    "2007": (encode_post2007, encode_post2007_from_date, True, "week"),
}

FORMAT_REFERENCE = """
## Early 1980s

Three or four digits: the year within the decade followed by the month, e.g. `856` is June 1985.

## Late 1980s

Year, month and a two-letter factory code, e.g. `873SD` is March 1987 at factory SD.

## 1990 to 2006

Factory code followed by four digits alternating month and year:
1st and 3rd digits are the month, 2nd and 4th the year, e.g. `SD1003` is October 2003.
Factories starting with S or V read as 20xx, all others as 19xx.

## 2007 onwards

Factory code followed by four digits alternating week and year:
1st and 3rd digits are the week, 2nd and 4th the year, e.g. `FL2110` is week 21 of 2010.
RC stamped 2016 week 53 and 2017 week 52 with the previous year.

| Countries | Factory codes |
|---|---|
"""

_REFERENCE_TAGS = set(bleach.sanitizer.ALLOWED_TAGS) | {
    "h2", "p", "code", "table", "thead", "tbody", "tr", "th", "td",
}


# ---------- Input adapters ----------

def _to_int(field, value):
    if value is None or value == "":
        raise InvalidArgumentError(field)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise FormatError(value, f"{field} must be a whole number")


def _to_date(value):
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise FormatError(value, "date must be YYYY-MM-DD")


def _payload():
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def _encode(fields):
    era = str(fields.get("era") or "").strip()
    if era not in _ENCODERS:
        raise InvalidArgumentError("era", f"{era!r} is not one of {', '.join(_ENCODERS)}")
    encode, encode_from_date, takes_factory, period = _ENCODERS[era]
    args = [fields.get("factory")] if takes_factory else []

    if fields.get("date"):
        return encode_from_date(*args, _to_date(fields["date"]))
    return encode(*args, _to_int("year", fields.get("year")), _to_int(period, fields.get(period)))


def _as_dict(era, result):
    data = result._asdict()
    if "countries" in data:
        data["countries"] = sorted(country.value for country in data["countries"])
    data["era"] = era
    data["manufacture_date"] = result.manufacture_date
    data["age"] = date.today().year - result.year
    return data


def _factory_table():
    return {code: sorted(c.value for c in countries) for code, countries in sorted(FACTORY_LOCATIONS.items())}


def render_format_reference():
    """Era reference as sanitized HTML, with the factory table appended."""
    groups = {}
    for code, countries in _factory_table().items():
        groups.setdefault(", ".join(countries), []).append(code)
    rows = "".join(f"| {names} | {' '.join(codes)} |\n" for names, codes in sorted(groups.items()))

    html = markdown.markdown(FORMAT_REFERENCE + rows, extensions=["extra"], output_format="html5")
    return bleach.clean(html, tags=_REFERENCE_TAGS, strip=True)


# ---------- Routes ----------

def init_date_code_routes(app):
    date_code_bp = Blueprint("date_code", __name__)

    @date_code_bp.route("/date_code", methods=["GET", "POST"])
    def date_code():
        result = None
        code = None
        fail_msg = None
        mode = request.form.get("mode", "decode")

        if request.method == "POST":
            era = request.form.get("era", "")
            try:
                if mode == "encode":
                    code = _encode(request.form)
                else:
                    result = _as_dict(era, decode_date_code(request.form.get("code", "").strip(), era))
            except DateCodeError as err:
                current_app.logger.info({"event": f"{mode}_rejected", "era": era, "err": err.kind})
                fail_msg = err.message

        return render_template(
            "date_code.html",
            eras=ERAS,
            mode=mode,
            result=result,
            code=code,
            fail_msg=fail_msg,
        )

    @date_code_bp.route("/api/decode", methods=["POST"])
    def api_decode():
        payload = _payload()
        era = str(payload.get("era", ""))
        try:
            result = decode_date_code(payload.get("code"), era)
        except DateCodeError as err:
            current_app.logger.info({"event": "decode_rejected", "era": era, "err": err.kind})
            return jsonify({"error": err.kind, "message": err.message}), 400
        return jsonify(_as_dict(era, result))

    @date_code_bp.route("/api/encode", methods=["POST"])
    def api_encode():
        payload = _payload()
        try:
            code = _encode(payload)
        except DateCodeError as err:
            current_app.logger.info({"event": "encode_rejected", "era": payload.get("era"), "err": err.kind})
            return jsonify({"error": err.kind, "message": err.message}), 400
        return jsonify({"era": payload.get("era"), "code": code})

    @date_code_bp.route("/api/factories")
    def api_factories():
        return jsonify(_factory_table())

    @date_code_bp.route("/formats")
    def formats():
        return render_template("formats.html", reference_html=render_format_reference())

    app.register_blueprint(date_code_bp)
