# build_prompt.py
from __future__ import annotations

from domain.models import LengthConstraint, as_config, as_nodes
from prompt_management import templates


def get_system_prompt() -> str:
    """입력과 무관한 고정 시스템 프롬프트"""
    return templates.SYSTEM_PROMPT


def _length_constraint_description(constraint) -> str:
    """
    Map a length constraint to its human-readable rule.
    Anything outside flexible / similar / exact (including None) resolves to flexible.
    """
    key = LengthConstraint.resolve(constraint)
    return templates.LENGTH_CONSTRAINT_DESCRIPTIONS[key]


def _render_texts_section(nodes) -> str:
    return "\n".join(
        templates.NODE_LINE_TEMPLATE.format(
            index=i,
            name=node.name,
            id=node.id,
            characters=node.characters,
        )
        for i, node in enumerate(nodes, start=1)
    )


def build_prompt(config, nodes) -> str:
    """
    Builds the per-request user prompt.

    config: GenerationConfig or the raw request dict
    nodes:  sequence of TextNode (or raw dicts), rendered in input order
    """
    config = as_config(config)
    nodes = as_nodes(nodes)

    # 비어있는 값은 기본값으로
    identity = config.identity or templates.DEFAULT_IDENTITY
    audience = config.target_audience or templates.DEFAULT_AUDIENCE
    particles = templates.PARTICLES_YES if config.polite_particles else templates.PARTICLES_NO

    return templates.USER_PROMPT_TEMPLATE.format(
        identity=identity,
        audience=audience,
        particles=particles,
        length_constraint=_length_constraint_description(config.length_constraint),
        texts_section=_render_texts_section(nodes),
    )
