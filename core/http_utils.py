from flask import make_response, jsonify


# api 공통 에러 응답: {"error": message}
def _json_err(message, status=400):
    resp = make_response(jsonify({"error": message or "Unknown error"}), status)
    resp.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
    return resp
