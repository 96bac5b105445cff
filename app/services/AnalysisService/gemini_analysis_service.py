"""
Remote multimodal analysis backed by the Gemini API.

One call per request: the image (when present) and the prompt are sent as
parts of a single user turn through the async google-genai client.
"""

from __future__ import annotations

import asyncio
import base64
import logging
from typing import Any

from google import genai
from google.genai import errors, types
from langfuse import observe

from app.entities.image import EncodedImage
from app.services.AnalysisService.analysis_service_interface import (
    AnalysisServiceInterface,
)

EMPTY_RESPONSE_TEXT = "No response generated."


class RemoteAnalysisError(Exception):
    """Raised when the analysis backend rejects or cannot complete a request."""

    def __init__(self, message: str | None = None) -> None:
        self.message = message
        super().__init__(message or "")


class GeminiAnalysisService(AnalysisServiceInterface):
    def __init__(
        self,
        model_name: str,
        temperature: float,
        logger: logging.Logger,
        api_key: str | None = None,
        timeout_seconds: float | None = 120,
    ) -> None:
        """
        Args:
            model_name: Gemini model used for every request
            temperature: Sampling temperature
            logger: Logger instance
            api_key: Gemini API key; the client falls back to GEMINI_API_KEY /
                GOOGLE_API_KEY from the environment when omitted
            timeout_seconds: Upper bound for a single request; None or 0 waits
                indefinitely
        """
        self.model_name = model_name
        self.temperature = temperature
        self.logger = logger
        self.timeout_seconds = timeout_seconds or None

        self.client = genai.Client(api_key=api_key)

        self.logger.info(
            "GeminiAnalysisService initialized. Model: %s, timeout: %s",
            self.model_name,
            self.timeout_seconds,
        )

    def _build_contents(
        self, prompt: str, image: EncodedImage | None
    ) -> list[Any]:
        parts: list[types.Part] = []

        if image is not None:
            parts.append(
                types.Part.from_bytes(
                    data=base64.b64decode(image.payload),
                    mime_type=image.mime_type,
                )
            )

        if prompt:
            parts.append(types.Part.from_text(text=prompt))

        return [types.Content(role="user", parts=parts)]

    @observe()
    async def analyze_content(
        self,
        prompt: str,
        image: EncodedImage | None = None,
    ) -> str:
        contents = self._build_contents(prompt, image)
        config = types.GenerateContentConfig(temperature=self.temperature)

        self.logger.info(
            "Requesting analysis (prompt: %d chars, image: %s)",
            len(prompt),
            image.mime_type if image else "none",
        )

        deadline = asyncio.timeout(self.timeout_seconds)
        try:
            async with deadline:
                response = await self.client.aio.models.generate_content(
                    model=self.model_name,
                    contents=contents,
                    config=config,
                )
        except TimeoutError as exc:
            # Transport timeouts raised before our own deadline keep their message
            if not deadline.expired():
                self.logger.error("Gemini transport timed out: %s", exc, exc_info=True)
                raise RemoteAnalysisError(str(exc) or None) from exc

            self.logger.error(
                "Analysis request timed out after %s seconds", self.timeout_seconds
            )
            raise RemoteAnalysisError(
                f"The analysis request timed out after {self.timeout_seconds:g} seconds."
            ) from exc
        except errors.APIError as exc:
            self.logger.error("Gemini request failed: %s", exc, exc_info=True)
            raise RemoteAnalysisError(exc.message or None) from exc

        text = response.text if response else None
        if not text:
            self.logger.warning("Gemini returned an empty response")
            return EMPTY_RESPONSE_TEXT

        self.logger.info("Received analysis of %d characters", len(text))
        return text
