# models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence


class LengthConstraint(str, Enum):
    FLEXIBLE = "flexible"
    SIMILAR = "similar"
    EXACT = "exact"

    @classmethod
    def resolve(cls, value) -> "LengthConstraint":
        """알 수 없는 값(누락 포함)은 flexible 로 떨어진다"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.FLEXIBLE


@dataclass(frozen=True)
class GenerationConfig:
    identity: str = ""
    target_audience: str = ""
    polite_particles: bool = False
    length_constraint: LengthConstraint = LengthConstraint.FLEXIBLE

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GenerationConfig":
        data = data or {}
        return cls(
            identity=(data.get("identity") or ""),
            target_audience=(data.get("targetAudience") or ""),
            polite_particles=bool(data.get("politeParticles")),
            length_constraint=LengthConstraint.resolve(data.get("lengthConstraint")),
        )


@dataclass(frozen=True)
class FontName:
    family: str = ""
    style: str = ""


@dataclass(frozen=True)
class TextNode:
    id: str
    characters: str
    name: str = ""
    # 아래 메타데이터는 그대로 들고만 다닌다 (프롬프트/파싱에는 사용 안 함)
    font_name: FontName = field(default_factory=FontName)
    path: tuple = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TextNode":
        font = data.get("fontName") or {}
        if not isinstance(font, dict):
            font = {}
        return cls(
            id=str(data.get("id", "")),
            characters=data.get("characters") or "",
            name=data.get("name") or "",
            font_name=FontName(family=font.get("family") or "", style=font.get("style") or ""),
            path=tuple(data.get("path") or ()),
        )


@dataclass
class VariantResult:
    node_id: Any
    original: str
    options: List[Any]

    @classmethod
    def identity(cls, node: TextNode) -> "VariantResult":
        """재작성 없이 원문 3개로 채운 결과"""
        return cls(
            node_id=node.id,
            original=node.characters,
            options=[node.characters, node.characters, node.characters],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"nodeId": self.node_id, "original": self.original, "options": list(self.options)}


@dataclass
class GenerationResults:
    variants: List[VariantResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"variants": [v.to_dict() for v in self.variants]}


def as_config(config) -> GenerationConfig:
    if isinstance(config, GenerationConfig):
        return config
    return GenerationConfig.from_dict(config)


def as_nodes(nodes: Sequence) -> List[TextNode]:
    return [n if isinstance(n, TextNode) else TextNode.from_dict(n) for n in (nodes or [])]
