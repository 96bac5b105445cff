import os

from app.bootstrap.components import Components
from app.components.configuration.configuration_interface import (
    ConfigurationInterface,
)
from app.components.logger.logger_interface import LoggerInterface
from app.components.preview.preview_store import PreviewStore
from app.services.AnalysisService.analysis_service_interface import (
    AnalysisServiceInterface,
)
from app.services.AnalysisService.gemini_analysis_service import (
    GeminiAnalysisService,
)
from app.services.ConsoleService.console_service import ConsoleService
from app.services.ConsoleService.console_service_interface import (
    ConsoleServiceInterface,
)
from app.services.FormService.analysis_pipeline import AnalysisPipeline
from app.services.FormService.form_session import FormSession
from app.services.FormService.form_session_interface import FormSessionInterface
from app.services.ImageIngestionService.image_ingestion_service import (
    ImageIngestionService,
)
from app.services.ImageIngestionService.image_ingestion_service_interface import (
    ImageIngestionServiceInterface,
)


def get_analysis_service(components: Components) -> AnalysisServiceInterface:
    """
    Create the Gemini-backed analysis service.

    Environment variables:
        GEMINI_API_KEY: API key for the Gemini API (GOOGLE_API_KEY also works)
    """
    configuration = components.get_component(ConfigurationInterface)

    api_key = os.getenv("GEMINI_API_KEY", "").strip() or None

    model_name = configuration.get_configuration(
        "MODEL_NAME", str, default="gemini-3-flash-preview"
    )
    temperature = configuration.get_configuration(
        "LLM_TEMPERATURE", float, default=0.7
    )
    timeout_seconds = configuration.get_configuration(
        "ANALYSIS_TIMEOUT_SECONDS", float, default=120.0
    )

    return GeminiAnalysisService(
        model_name=model_name,
        temperature=temperature,
        logger=components.get_component(LoggerInterface).get_logger(
            "GeminiAnalysisService"
        ),
        api_key=api_key,
        timeout_seconds=timeout_seconds,
    )


def get_image_ingestion_service(
    components: Components,
) -> ImageIngestionServiceInterface:
    configuration = components.get_component(ConfigurationInterface)
    max_image_bytes = configuration.get_configuration(
        "MAX_IMAGE_BYTES", int, default=10 * 1024 * 1024
    )

    return ImageIngestionService(
        preview_store=components.get_component(PreviewStore),
        logger=components.get_component(LoggerInterface).get_logger(
            "ImageIngestionService"
        ),
        max_image_bytes=max_image_bytes,
    )


def get_form_session(components: Components) -> FormSessionInterface:
    logger = components.get_component(LoggerInterface)

    pipeline = AnalysisPipeline(
        analysis_service=get_analysis_service(components),
        logger=logger.get_logger("AnalysisPipeline"),
    )

    return FormSession(
        ingestion_service=get_image_ingestion_service(components),
        pipeline=pipeline,
        logger=logger.get_logger("FormSession"),
    )


def get_console_service(
    components: Components, form_session: FormSessionInterface
) -> ConsoleServiceInterface:
    return ConsoleService(
        form_session=form_session,
        logger=components.get_component(LoggerInterface).get_logger("ConsoleService"),
    )
