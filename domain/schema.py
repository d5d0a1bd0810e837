# -------------------- 입력 양식 스키마 --------------------
# lengthConstraint 는 enum 으로 막지 않는다: 모르는 값은 flexible 로 처리된다
generation_config_schema = {
    "type": "object",
    "properties": {
        "identity": {"type": ["string", "null"]},
        "targetAudience": {"type": ["string", "null"]},
        "politeParticles": {"type": ["boolean", "string", "number", "null"]},
        "lengthConstraint": {"type": ["string", "null"]},
    },
    "additionalProperties": True,
}

text_node_schema = {
    "type": "object",
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "name": {"type": ["string", "null"]},
        "characters": {"type": "string"},
        "fontName": {
            "type": ["object", "null"],
            "properties": {
                "family": {"type": "string"},
                "style": {"type": "string"},
            },
        },
        "path": {"type": ["array", "null"], "items": {"type": "string"}},
    },
    "required": ["id", "characters"],
    "additionalProperties": True,
}

# ===== JSON API( /generate ) POST 스키마 =====
generate_request_schema = {
    "type": "object",
    "properties": {
        "config": generation_config_schema,
        "nodes": {
            "type": "array",
            "items": text_node_schema,
            "minItems": 1,
        },
    },
    "required": ["config", "nodes"],
    "additionalProperties": True,
}
