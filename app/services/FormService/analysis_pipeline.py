from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from app.entities.analysis import AnalysisResult
from app.entities.image import EncodedImage
from app.services.AnalysisService.analysis_service_interface import (
    AnalysisServiceInterface,
)

EMPTY_REQUEST_MESSAGE = "Please provide at least a prompt or an image."
GENERIC_FAILURE_MESSAGE = "An unexpected error occurred."


class EmptyRequestError(Exception):
    def __init__(self) -> None:
        super().__init__(EMPTY_REQUEST_MESSAGE)


class RemoteFailureError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def _local_now() -> datetime:
    return datetime.now().astimezone()


class AnalysisPipeline:
    """Builds one analysis request from the form input and awaits the reply."""

    def __init__(
        self,
        analysis_service: AnalysisServiceInterface,
        logger: logging.Logger,
        clock: Callable[[], datetime] = _local_now,
    ) -> None:
        self.analysis_service = analysis_service
        self.logger = logger
        self.clock = clock

    @staticmethod
    def check_request(prompt: str, image: EncodedImage | None) -> None:
        # Whitespace-only prompts are accepted as-is
        if not prompt and image is None:
            raise EmptyRequestError()

    async def analyze(
        self, prompt: str, image: EncodedImage | None = None
    ) -> AnalysisResult:
        self.check_request(prompt, image)

        try:
            text = await self.analysis_service.analyze_content(prompt, image)
        except Exception as exc:
            message = str(exc) or GENERIC_FAILURE_MESSAGE
            self.logger.error("Analysis request failed: %s", message)
            raise RemoteFailureError(message) from exc

        return AnalysisResult(text=text, produced_at=self.clock())
