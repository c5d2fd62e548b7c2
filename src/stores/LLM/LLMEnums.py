from enum import Enum

class LLMModel(Enum):
    GROQ="groq"
    OPENAI="openai"
    COHERE="cohere"
    GEMINI="gemini"

class OpenAIEnums(Enum):
    SYSTEM = "system"
    USER = "user"

class GeminiEnums(Enum):
    USER = "user"
