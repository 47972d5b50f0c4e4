from .base import BaseProvider
from .gemini_provider import GeminiProvider
from .ollama_provider import OllamaProvider
from .openai_provider import OpenAIProvider

__all__ = ["BaseProvider", "GeminiProvider", "OllamaProvider", "OpenAIProvider"]
