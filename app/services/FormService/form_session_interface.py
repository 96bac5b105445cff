from abc import ABC, abstractmethod

from app.entities.form_state import FormState
from app.entities.image import SelectedFile


class FormSessionInterface(ABC):
    @property
    @abstractmethod
    def state(self) -> FormState:
        """Current form state."""

    @property
    @abstractmethod
    def can_submit(self) -> bool:
        """Whether the submit action is enabled."""

    @abstractmethod
    def set_prompt(self, prompt: str) -> FormState:
        """Replace the prompt text."""

    @abstractmethod
    async def select_file(self, file: SelectedFile) -> FormState:
        """Ingest a newly selected file as the form image."""

    @abstractmethod
    def clear_image(self) -> FormState:
        """Drop the current image and reset the file picker."""

    @abstractmethod
    async def submit(self) -> FormState:
        """Run one analysis request for the current prompt and image."""
