from __future__ import annotations

import logging

from app.entities.form_state import (
    FormAction,
    FormState,
    ImageCleared,
    ImageSelected,
    IngestionFailed,
    PromptEdited,
    SubmitFailed,
    SubmitRejected,
    SubmitStarted,
    SubmitSucceeded,
)
from app.entities.image import SelectedFile
from app.services.FormService.analysis_pipeline import (
    AnalysisPipeline,
    EmptyRequestError,
    RemoteFailureError,
)
from app.services.FormService.form_reducer import form_reducer
from app.services.FormService.form_session_interface import FormSessionInterface
from app.services.ImageIngestionService.file_selection_control import (
    FileSelectionControl,
)
from app.services.ImageIngestionService.image_ingestion_service import (
    ImageReadError,
    ImageTooLargeError,
    InvalidFileTypeError,
)
from app.services.ImageIngestionService.image_ingestion_service_interface import (
    ImageIngestionServiceInterface,
)

INVALID_FILE_TYPE_MESSAGE = "Please select a valid image file."
IMAGE_READ_MESSAGE = "The selected file could not be read."


class FormSession(FormSessionInterface):
    """
    Owns the form state and is its only writer.

    Every change goes through form_reducer; the user actions below translate
    service outcomes and errors into form actions.
    """

    def __init__(
        self,
        ingestion_service: ImageIngestionServiceInterface,
        pipeline: AnalysisPipeline,
        logger: logging.Logger,
        file_control: FileSelectionControl | None = None,
    ) -> None:
        self.ingestion_service = ingestion_service
        self.pipeline = pipeline
        self.logger = logger
        self.file_control = file_control or FileSelectionControl()
        self._state = FormState()

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def can_submit(self) -> bool:
        return not self._state.request.is_in_flight and self._state.has_input

    def dispatch(self, action: FormAction) -> FormState:
        self._state = form_reducer(self._state, action)
        return self._state

    def set_prompt(self, prompt: str) -> FormState:
        return self.dispatch(PromptEdited(prompt))

    async def select_file(self, file: SelectedFile) -> FormState:
        if not self.file_control.select(str(file.path)):
            self.logger.info("File selection unchanged, ignoring: %s", file.path)
            return self._state

        try:
            image = await self.ingestion_service.ingest(file)
        except InvalidFileTypeError:
            return self.dispatch(IngestionFailed(INVALID_FILE_TYPE_MESSAGE))
        except ImageTooLargeError as error:
            limit_mb = error.max_bytes / (1024 * 1024)
            return self.dispatch(
                IngestionFailed(f"The image exceeds the {limit_mb:g} MB limit.")
            )
        except ImageReadError:
            return self.dispatch(IngestionFailed(IMAGE_READ_MESSAGE))

        return self.dispatch(ImageSelected(image))

    def clear_image(self) -> FormState:
        self.ingestion_service.clear()
        self.file_control.reset()
        return self.dispatch(ImageCleared())

    async def submit(self) -> FormState:
        if self._state.request.is_in_flight:
            self.logger.debug("Ignoring submit while a request is in flight")
            return self._state

        prompt = self._state.prompt
        image = self._state.image

        try:
            self.pipeline.check_request(prompt, image)
        except EmptyRequestError as error:
            self.logger.info("Rejected empty analysis request")
            return self.dispatch(SubmitRejected(str(error)))

        self.dispatch(SubmitStarted())

        try:
            result = await self.pipeline.analyze(prompt, image)
        except RemoteFailureError as error:
            return self.dispatch(SubmitFailed(error.message))

        return self.dispatch(SubmitSucceeded(result))
