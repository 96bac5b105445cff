import logging
from datetime import datetime

import pytest

from app.components.preview.preview_store import PreviewStore
from app.entities.image import EncodedImage
from app.services.AnalysisService.analysis_service_interface import (
    AnalysisServiceInterface,
)
from app.services.AnalysisService.gemini_analysis_service import RemoteAnalysisError
from app.services.ConsoleService.console_service import HELP_TEXT, ConsoleService
from app.services.FormService.analysis_pipeline import (
    EMPTY_REQUEST_MESSAGE,
    AnalysisPipeline,
)
from app.services.FormService.form_session import (
    IMAGE_READ_MESSAGE,
    INVALID_FILE_TYPE_MESSAGE,
    FormSession,
)
from app.services.ImageIngestionService.image_ingestion_service import (
    ImageIngestionService,
)

FIXED_TIME = datetime(2026, 10, 18, 9, 30, 5)


class StubAnalysisService(AnalysisServiceInterface):
    def __init__(self) -> None:
        self.error: Exception | None = None
        self.calls: list[tuple[str, EncodedImage | None]] = []

    async def analyze_content(
        self, prompt: str, image: EncodedImage | None = None
    ) -> str:
        self.calls.append((prompt, image))
        if self.error:
            raise self.error
        return "A cat."


class ScriptedInput:
    def __init__(self, lines: list[str]) -> None:
        self.lines = list(lines)

    async def __call__(self, prompt: str) -> str:
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def analysis_service() -> StubAnalysisService:
    return StubAnalysisService()


@pytest.fixture
def output() -> list[str]:
    return []


@pytest.fixture
def session(analysis_service: StubAnalysisService) -> FormSession:
    return FormSession(
        ingestion_service=ImageIngestionService(
            preview_store=PreviewStore(),
            logger=logging.getLogger("ImageIngestionServiceTest"),
        ),
        pipeline=AnalysisPipeline(
            analysis_service=analysis_service,
            logger=logging.getLogger("AnalysisPipelineTest"),
            clock=lambda: FIXED_TIME,
        ),
        logger=logging.getLogger("FormSessionTest"),
    )


def _console(session: FormSession, output: list[str], lines: list[str]) -> ConsoleService:
    return ConsoleService(
        form_session=session,
        logger=logging.getLogger("ConsoleServiceTest"),
        input_func=ScriptedInput(lines),
        output_func=output.append,
    )


@pytest.mark.asyncio
async def test_prompt_and_analyze_prints_result(
    session: FormSession, output: list[str], analysis_service: StubAnalysisService
) -> None:
    console = _console(session, output, ["Describe this", "/analyze", "/quit"])

    await console.start()

    assert analysis_service.calls == [("Describe this", None)]
    assert "Processing analysis..." in output
    assert "Result (09:30:05)\nA cat." in output


@pytest.mark.asyncio
async def test_prompt_command_sets_prompt(
    session: FormSession, output: list[str]
) -> None:
    console = _console(session, output, [])

    await console.handle_line("/prompt What breed is it?")

    assert session.state.prompt == "What breed is it?"


@pytest.mark.asyncio
async def test_analyze_without_input_shows_error(
    session: FormSession, output: list[str], analysis_service: StubAnalysisService
) -> None:
    console = _console(session, output, ["/analyze"])

    await console.start()

    assert f"Error: {EMPTY_REQUEST_MESSAGE}" in output
    assert "Processing analysis..." not in output
    assert analysis_service.calls == []


@pytest.mark.asyncio
async def test_remote_failure_is_printed(
    session: FormSession, output: list[str], analysis_service: StubAnalysisService
) -> None:
    analysis_service.error = RemoteAnalysisError("rate limited")
    console = _console(session, output, ["hello", "/analyze"])

    await console.start()

    assert "Error: rate limited" in output


@pytest.mark.asyncio
async def test_image_commands(
    session: FormSession, output: list[str], tmp_path
) -> None:
    image_path = tmp_path / "cat.jpg"
    image_path.write_bytes(b"jpeg")
    text_path = tmp_path / "notes.txt"
    text_path.write_text("hi", encoding="utf-8")

    console = _console(
        session,
        output,
        [f"/image {image_path}", f"/image {text_path}", "/clear", "/status"],
    )

    await console.start()

    assert "Image ready: cat.jpg (image/jpeg, 4 bytes)" in output
    assert f"Error: {INVALID_FILE_TYPE_MESSAGE}" in output
    assert "Image removed." in output
    assert "Image: <none>" in output[-1]


@pytest.mark.asyncio
async def test_help_and_unknown_commands(
    session: FormSession, output: list[str]
) -> None:
    console = _console(session, output, ["/help", "/bogus", "/image"])

    await console.start()

    assert HELP_TEXT in output
    assert "Unknown command /bogus. Type /help for commands." in output
    assert "Usage: /image <path>" in output


def test_render_status_shows_request_state(session: FormSession) -> None:
    session.set_prompt("Describe this")

    status = ConsoleService.render_status(session.state)

    assert "Prompt: Describe this" in status
    assert "Request: idle" in status


@pytest.mark.asyncio
async def test_prompt_command_keeps_raw_text(
    session: FormSession, output: list[str]
) -> None:
    console = _console(session, output, [])

    await console.handle_line("/prompt   two  spaces  ")

    assert session.state.prompt == "  two  spaces  "


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "bad_path", ["~no_such_user_zz/cat.png", "bad\x00name.png"]
)
async def test_bad_image_path_is_reported_and_session_continues(
    session: FormSession, output: list[str], bad_path: str
) -> None:
    console = _console(session, output, [f"/image {bad_path}", "/status"])

    await console.start()

    assert f"Error: {IMAGE_READ_MESSAGE}" in output
    assert "Request: idle" in output[-1]


@pytest.mark.asyncio
async def test_reselecting_same_path_asks_to_clear_first(
    session: FormSession, output: list[str], tmp_path
) -> None:
    image_path = tmp_path / "cat.jpg"
    image_path.write_bytes(b"jpeg")
    console = _console(session, output, [f"/image {image_path}", f"/image {image_path}"])

    await console.start()

    assert output[-1] == (
        "That file is already selected. Use /clear before choosing it again."
    )
