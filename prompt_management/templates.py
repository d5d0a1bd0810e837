"""
templates.py
태국어 UX 카피 변형 생성용 프롬프트 문구 모음

build_prompt.py 에서 사용:
  - SYSTEM_PROMPT (고정 시스템 프롬프트)
  - USER_PROMPT_TEMPLATE (요청별 프롬프트, str.format 으로 채움)
  - LENGTH_CONSTRAINT_DESCRIPTIONS
  - 기본값 (DEFAULT_IDENTITY, DEFAULT_AUDIENCE)
"""

from __future__ import annotations

from domain.models import LengthConstraint

# --------------------------------------------------------------------------
# A. 기본값
# --------------------------------------------------------------------------
DEFAULT_IDENTITY = "General professional Thai (สุภาพทั่วไป)"
DEFAULT_AUDIENCE = "General users"

PARTICLES_YES = "Yes, add appropriately"
PARTICLES_NO = "No"

# --------------------------------------------------------------------------
# B. 길이 제약 설명
# --------------------------------------------------------------------------
LENGTH_CONSTRAINT_DESCRIPTIONS = {
    LengthConstraint.FLEXIBLE: "Flexible (natural length, no strict limit)",
    LengthConstraint.SIMILAR: "Similar length (±10% of original character count)",
    LengthConstraint.EXACT: "Exact length (match original character count as closely as possible)",
}

# --------------------------------------------------------------------------
# C. SYSTEM PROMPT
# --------------------------------------------------------------------------
SYSTEM_PROMPT = """
You are an expert Thai UX copywriter with deep knowledge of Thai language nuances, tone, and cultural context.

Your task is to generate Thai text variants based on specific Identity/Mood profiles provided by the user.

Key Rules:
1. Thai text has NO SPACES between words - write naturally flowing Thai
2. Respect polite particles (ครับ/ค่ะ/นะ) when requested
3. Match the identity/mood precisely (formal, casual, sarcastic, luxury, Gen Z, etc.)
4. Preserve any variables in curly braces (e.g., {userName}) EXACTLY as they appear
5. Generate exactly 3 distinct variants for each text
6. Each variant should be meaningfully different while matching the same identity/mood
7. Consider the target audience when choosing words and tone
8. Return ONLY valid JSON, no additional text

Output format:
{
  "variants": [
    {
      "nodeId": "123:456",
      "options": ["variant1", "variant2", "variant3"]
    }
  ]
}
""".strip()

# --------------------------------------------------------------------------
# D. USER PROMPT
# --------------------------------------------------------------------------
# 중괄호는 format 때문에 이중으로 이스케이프
USER_PROMPT_TEMPLATE = """
Generate Thai text variants with the following profile:

**Identity/Mood:** {identity}
**Target Audience:** {audience}
**Polite Particles (Ka/Krub):** {particles}
**Length Constraint:** {length_constraint}

**Original texts to rewrite:**
{texts_section}

Generate exactly 3 distinct variants for EACH text above. Each variant should:
- Match the specified Identity/Mood tone and style
- Be appropriate for the Target Audience
- Follow the length constraint guidelines
- Include polite particles if requested
- Be meaningfully different from each other

Return ONLY the JSON response with this exact format:
{{
  "variants": [
    {{
      "nodeId": "node-id-here",
      "options": ["variant1", "variant2", "variant3"]
    }}
  ]
}}
""".strip()

NODE_LINE_TEMPLATE = '{index}. [Node: {name}, ID: {id}] "{characters}"'
