from flask import request, current_app
from werkzeug.exceptions import HTTPException

from core.http_utils import _json_err


# -------------------- 에러 응답 (항상 JSON) --------------------

def _http_error(e: HTTPException):
    return _json_err(e.description or e.name, status=e.code or 500)


def _unhandled_error(e: Exception):
    current_app.logger.exception("[unhandled] %s %s", request.method, request.path)
    return _json_err(str(e) or "Unknown error", status=500)


# -------------------- 요청 로깅 --------------------

def log_client_errors(resp):
    if 400 <= resp.status_code < 500:
        current_app.logger.info(
            "[%s] %s %s ip=%s content_type=%s resp=%s",
            resp.status_code,
            request.method,
            request.path,
            request.remote_addr,
            request.content_type,
            resp.get_data(as_text=True)[:500],
        )
    return resp


def register_hooks(app):
    app.register_error_handler(HTTPException, _http_error)
    app.register_error_handler(Exception, _unhandled_error)
    app.after_request(log_client_errors)
