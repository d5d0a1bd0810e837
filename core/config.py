import os

from dotenv import load_dotenv

# .env 로드 (있으면)
load_dotenv()


def _csv(v: str):
    return [x.strip() for x in (v or "").split(",") if x.strip()]


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return int(v)


def _env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None or not v.strip():
        return default
    return float(v)


class Config:
    PORT = _env_int("PORT", 3000)

    # -------------------------
    # OpenAI
    # -------------------------
    OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
    OPENAI_TEMPERATURE = 0.7  # 고정값
    OPENAI_TIMEOUT = _env_float("OPENAI_TIMEOUT", 60.0)

    # 요청 본문 1MB 제한
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024

    # -------------------------
    # CORS (기본: 요청 Origin 그대로 허용)
    # -------------------------
    CORS_ORIGINS = _csv(os.getenv("CORS_ORIGINS", "*"))
    CORS_METHODS = ["POST", "GET", "OPTIONS"]

    # -------------------------
    # Rate limiting (Flask-Limiter 표준 키)
    # -------------------------
    REDIS_URL = os.getenv("REDIS_URL", "")
    RATELIMIT_STORAGE_URI = REDIS_URL if REDIS_URL else "memory://"
    RATELIMIT_ENABLED = True
    # /generate: IP 당 15분에 100회
    RATELIMIT_GENERATE = os.getenv("RATELIMIT_GENERATE", "100 per 15 minutes")

    # -------------------------
    # Logging
    # -------------------------
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
