from __future__ import annotations

from pathlib import Path

from flask import jsonify, send_file


def error_response(message: str, status_code: int):
    return jsonify({"error": message}), status_code


def csv_attachment(path: str | Path, filename: str):
    response = send_file(
        Path(path).resolve(),
        mimetype="text/csv",
        as_attachment=True,
        download_name=filename,
        max_age=0,
    )
    response.headers["Cache-Control"] = "must-revalidate"
    return response
