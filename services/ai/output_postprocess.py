import json

from flask import has_app_context, current_app

from domain.models import GenerationResults, VariantResult, as_nodes


class _MalformedReply(ValueError):
    pass


def _identity_fallback(nodes):
    """원문을 그대로 3개 후보로 돌려준다 (입력 순서 유지)"""
    return GenerationResults(variants=[VariantResult.identity(n) for n in nodes])


def _warn(msg, *args):
    if has_app_context():
        current_app.logger.warning(msg, *args)


def _find_original(nodes, node_id) -> str:
    for n in nodes:
        if n.id == node_id:
            return n.characters
    return ""


def _entry_to_result(entry, nodes):
    """
    variants 항목 1개 -> VariantResult
      - 객체가 아닌 항목은 건너뛴다 (None 반환, 빠진 노드는 뒤에서 원문으로 채움)
      - options 가 배열이 아니면 [] 로 둔다
    """
    if not isinstance(entry, dict):
        _warn("[generate] skipping variant entry that is not an object: %s", type(entry).__name__)
        return None
    node_id = entry.get("nodeId")
    options = entry.get("options") or []
    if not isinstance(options, list):
        _warn("[generate] options is not an array for nodeId=%r", node_id)
        options = []
    return VariantResult(
        node_id=node_id,
        original=_find_original(nodes, node_id),
        options=list(options),
    )


def _parse_variants(raw_content, nodes) -> GenerationResults:
    try:
        parsed = json.loads(raw_content)
    except (TypeError, ValueError, RecursionError) as e:
        raise _MalformedReply(f"invalid json: {e}") from e

    variants = parsed.get("variants") if isinstance(parsed, dict) else None
    if not isinstance(variants, list):
        raise _MalformedReply("invalid response format: 'variants' array missing")

    results = (_entry_to_result(v, nodes) for v in variants)
    return GenerationResults(variants=[r for r in results if r is not None])


def parse_response(raw_content, nodes) -> GenerationResults:
    """
    모델 응답(JSON 문자열) -> GenerationResults

      - JSON 파싱 실패 / variants 배열 없음: 전체를 원문 그대로 (global fallback)
      - 응답에서 빠진 노드: 원문 3개로 채워서 뒤에 추가
      - 같은 nodeId 가 여러 번 오면 그대로 둔다 (중복 제거 안 함)
      - 알 수 없는 nodeId 는 original="" 로 받아준다
      - 객체가 아닌 항목은 건너뛰고, 배열이 아닌 options 는 [] 로 받는다

    Never raises.
    """
    nodes = as_nodes(nodes)

    try:
        results = _parse_variants(raw_content, nodes)
    except _MalformedReply as e:
        _warn("[generate] malformed model reply, using fallback: %s", e)
        return _identity_fallback(nodes)

    seen = [v.node_id for v in results.variants]
    missing = [n for n in nodes if n.id not in seen]
    if missing:
        _warn("[generate] %d node(s) missing from model reply, filled with original text", len(missing))
    for node in missing:
        results.variants.append(VariantResult.identity(node))

    return results
