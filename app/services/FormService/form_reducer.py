from dataclasses import replace

from app.entities.analysis import RequestState
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


def form_reducer(state: FormState, action: FormAction) -> FormState:
    """
    Return the form state that results from applying action to state.

    Request transitions follow idle/succeeded/failed -> in_flight -> succeeded
    or failed. Completion actions are ignored unless a request is in flight,
    and a start action is ignored while one already is.
    """
    if isinstance(action, PromptEdited):
        return replace(state, prompt=action.prompt)

    if isinstance(action, ImageSelected):
        return replace(state, image=action.image, error=None)

    if isinstance(action, ImageCleared):
        return replace(state, image=None)

    if isinstance(action, (IngestionFailed, SubmitRejected)):
        return replace(state, error=action.message)

    if isinstance(action, SubmitStarted):
        if state.request.is_in_flight:
            return state
        return replace(state, request=RequestState.in_flight(), error=None)

    if isinstance(action, SubmitSucceeded):
        if not state.request.is_in_flight:
            return state
        return replace(
            state,
            request=RequestState.succeeded(action.result),
            result=action.result,
        )

    if isinstance(action, SubmitFailed):
        if not state.request.is_in_flight:
            return state
        return replace(
            state,
            request=RequestState.failed(action.message),
            error=action.message,
        )

    raise TypeError(f"Unsupported form action: {action!r}")
