from sampurnan.infrastructure.genai.di import GenAIProvider

__all__ = ["GenAIProvider"]
