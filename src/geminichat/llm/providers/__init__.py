from .gemini import DEFAULT_BASE_URL, DEFAULT_MODEL, GeminiProvider

__all__ = ["DEFAULT_BASE_URL", "DEFAULT_MODEL", "GeminiProvider"]
