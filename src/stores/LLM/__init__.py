from .LLMFactory import LLMFactory
