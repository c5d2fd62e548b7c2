from abc import ABC, abstractmethod

class LLMInterface(ABC):

    @abstractmethod
    async def set_summarization_model(self, summarization_model_id: str):
        pass

    @abstractmethod
    async def summarize_text(self, user_prompt: str, system_prompt: str = ""):
        pass
