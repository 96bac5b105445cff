from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from app.entities.form_state import FormState
from app.entities.image import SelectedFile
from app.services.ConsoleService.console_service_interface import (
    ConsoleServiceInterface,
)
from app.services.FormService.form_session_interface import FormSessionInterface

InputFunc = Callable[[str], Awaitable[str]]
OutputFunc = Callable[[str], None]

HELP_TEXT = """Commands:
  /prompt <text>  Set the prompt (plain text works too)
  /image <path>   Select an image file
  /clear          Remove the selected image
  /analyze        Send the prompt and image for analysis
  /status         Show the current form
  /help           Show this message
  /quit           Exit"""


async def _read_line(prompt: str) -> str:
    return await asyncio.to_thread(input, prompt)


class ConsoleService(ConsoleServiceInterface):
    """Interactive terminal front end for a FormSession."""

    def __init__(
        self,
        form_session: FormSessionInterface,
        logger: logging.Logger,
        input_func: InputFunc = _read_line,
        output_func: OutputFunc = print,
    ) -> None:
        self.form_session = form_session
        self.logger = logger
        self.input_func = input_func
        self.output_func = output_func
        self._running = False

    async def start(self) -> None:
        self._running = True
        self.output_func("Vision Lab. Type /help for commands.")

        while self._running:
            try:
                line = await self.input_func("> ")
            except EOFError:
                break
            await self.handle_line(line)

        self.logger.info("Console session ended")

    async def handle_line(self, line: str) -> None:
        stripped = line.strip()
        if not stripped:
            return

        command, _, raw_argument = line.lstrip().partition(" ")
        command = command.lower()
        argument = raw_argument.strip()

        if command == "/quit":
            self._running = False
        elif command == "/help":
            self.output_func(HELP_TEXT)
        elif command == "/prompt":
            self.form_session.set_prompt(raw_argument)
        elif command == "/image":
            await self._handle_image_command(argument)
        elif command == "/clear":
            self.form_session.clear_image()
            self.output_func("Image removed.")
        elif command == "/analyze":
            await self._handle_analyze_command()
        elif command == "/status":
            self.output_func(self.render_status(self.form_session.state))
        elif command.startswith("/"):
            self.output_func(f"Unknown command {command}. Type /help for commands.")
        else:
            self.form_session.set_prompt(line)

    async def _handle_image_command(self, argument: str) -> None:
        if not argument:
            self.output_func("Usage: /image <path>")
            return

        previous = self.form_session.state
        state = await self.form_session.select_file(SelectedFile.from_path(argument))
        if state is previous:
            self.output_func(
                "That file is already selected. Use /clear before choosing it again."
            )
        elif state.error:
            self._render_error(state)
        elif state.image is not None:
            self.output_func(
                f"Image ready: {state.image.file_name} ({state.image.mime_type}, "
                f"{state.image.size_bytes} bytes)"
            )

    async def _handle_analyze_command(self) -> None:
        if self.form_session.state.request.is_in_flight:
            self.output_func("An analysis is already running.")
            return

        if self.form_session.can_submit:
            self.output_func("Processing analysis...")

        state = await self.form_session.submit()
        if state.error:
            self._render_error(state)
        elif state.request.status == "succeeded" and state.result is not None:
            self.output_func(self.render_result(state))

    def _render_error(self, state: FormState) -> None:
        self.output_func(f"Error: {state.error}")

    @staticmethod
    def render_result(state: FormState) -> str:
        if state.result is None:
            return ""
        produced = state.result.produced_at.strftime("%H:%M:%S")
        return f"Result ({produced})\n{state.result.text}"

    @staticmethod
    def render_status(state: FormState) -> str:
        lines = [f"Prompt: {state.prompt or '<empty>'}"]
        if state.image is None:
            lines.append("Image: <none>")
        else:
            lines.append(
                f"Image: {state.image.file_name} ({state.image.mime_type}, "
                f"{state.image.size_bytes} bytes) preview {state.image.preview_handle}"
            )
        lines.append(f"Request: {state.request.status}")
        if state.error:
            lines.append(f"Error: {state.error}")
        return "\n".join(lines)
