from app.dependencies.components import get_components
from app.dependencies.services import get_console_service, get_form_session
from app.services.ConsoleService.console_service_interface import (
    ConsoleServiceInterface,
)
from app.services.FormService.form_session_interface import FormSessionInterface


async def bootstrap_app(
    env: str = "development",
    config_path: str = "configuration",
) -> ConsoleServiceInterface:
    components = get_components(env=env, config_path=config_path)
    form_session: FormSessionInterface = get_form_session(components)

    console: ConsoleServiceInterface = get_console_service(components, form_session)
    return console
