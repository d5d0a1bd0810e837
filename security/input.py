"""
input.py — JSON 요청 본문 검증 데코레이터
"""

from functools import wraps

from flask import request, abort, g
from jsonschema import validate, ValidationError


def _validate_schema(data, schema):
    """JSON Schema 검증 (필수 필드, 타입 등)"""
    if not schema:
        return
    try:
        validate(instance=data, schema=schema)
    except ValidationError as e:
        where = "/".join(str(p) for p in e.absolute_path)
        detail = f"{where}: {e.message}" if where else e.message
        abort(400, description=f"Invalid request: {detail}")


def require_json(json_schema=None):
    """
    JSON 본문 검증 데코레이터
      - 본문이 JSON 이 아니면 400
      - json_schema 에 맞지 않으면 400 (업스트림 호출 전에 끊는다)
      - 통과한 본문은 g.json_body 에 담긴다

    중괄호 등은 그대로 둔다: {userName} 같은 템플릿 변수를 모델에 그대로 넘겨야 함
    """
    def deco(f):
        @wraps(f)
        def wrapped(*args, **kwargs):
            payload = request.get_json(silent=True)
            if payload is None:
                abort(400, description="Invalid request: JSON body required")

            _validate_schema(payload, json_schema)
            g.json_body = payload
            return f(*args, **kwargs)
        return wrapped
    return deco
