from flask import Blueprint, jsonify, g, current_app

from core.extensions import limiter, generate_rate_limit
from core.http_utils import _json_err
from domain.models import GenerationConfig, TextNode
from domain.schema import generate_request_schema
from security.input import require_json
from services.ai.openai_service import generate_variants

api_generate_bp = Blueprint("api_generate", __name__)


@api_generate_bp.route("/generate", methods=["POST"])
@limiter.limit(generate_rate_limit)
@require_json(generate_request_schema)
def api_generate():
    data = g.json_body
    config = GenerationConfig.from_dict(data["config"])
    nodes = [TextNode.from_dict(n) for n in data["nodes"]]

    try:
        results = generate_variants(config, nodes)
    except Exception as e:
        # 업스트림 실패 / 빈 응답: 재시도 없이 500
        current_app.logger.exception("[generate] generation error nodes=%d", len(nodes))
        return _json_err(str(e) or "Unknown error", status=500)

    return jsonify(results.to_dict()), 200
