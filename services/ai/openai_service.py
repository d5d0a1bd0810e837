import time

from flask import current_app

from domain.models import GenerationResults, as_config, as_nodes
from prompt_management.build_prompt import build_prompt, get_system_prompt
from services.ai.errors import EmptyResponseError
from services.ai.output_postprocess import parse_response


def call_openai(system_prompt: str, user_prompt: str) -> str:
    """
    OpenAI chat completion 1회 호출 (스트리밍/재시도 없음)
      - 응답 내용이 비어 있으면 EmptyResponseError
      - provider 예외는 그대로 올려 보낸다
    """
    cfg = current_app.config
    model_name = cfg.get("OPENAI_MODEL") or "gpt-4o-mini"

    start = time.perf_counter()
    completion = current_app.openai_client.chat.completions.create(
        model=model_name,
        messages=[
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ],
        temperature=cfg.get("OPENAI_TEMPERATURE", 0.7),
        response_format={"type": "json_object"},
    )
    latency_ms = int((time.perf_counter() - start) * 1000)

    usage = getattr(completion, "usage", None)
    current_app.logger.info(
        "[openai] model=%s latency_ms=%s prompt_tokens=%s completion_tokens=%s total_tokens=%s",
        model_name,
        latency_ms,
        getattr(usage, "prompt_tokens", None) if usage else None,
        getattr(usage, "completion_tokens", None) if usage else None,
        getattr(usage, "total_tokens", None) if usage else None,
    )

    choices = getattr(completion, "choices", None) or []
    content = getattr(getattr(choices[0], "message", None), "content", None) if choices else None
    if not content:
        raise EmptyResponseError()
    return content


def generate_variants(config, nodes) -> GenerationResults:
    """(config, nodes) -> prompt -> OpenAI -> 노드별 변형 3개"""
    config = as_config(config)
    nodes = as_nodes(nodes)

    content = call_openai(get_system_prompt(), build_prompt(config, nodes))
    return parse_response(content, nodes)
