from abc import ABC, abstractmethod

from app.entities.image import EncodedImage


class AnalysisServiceInterface(ABC):
    @abstractmethod
    async def analyze_content(
        self,
        prompt: str,
        image: EncodedImage | None = None,
    ) -> str:
        """
        Send the prompt and optional image to the model and return its text.

        Raises on failure; the raised error's message is shown to the user
        when it has one.
        """
