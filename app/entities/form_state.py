from dataclasses import dataclass, field

from app.entities.analysis import AnalysisResult, RequestState
from app.entities.image import EncodedImage


@dataclass(frozen=True)
class FormState:
    """Everything the presentation layer renders for the analysis form."""

    prompt: str = ""
    image: EncodedImage | None = None
    request: RequestState = field(default_factory=RequestState.idle)
    result: AnalysisResult | None = None
    error: str | None = None

    @property
    def has_input(self) -> bool:
        return bool(self.prompt) or self.image is not None


@dataclass(frozen=True)
class PromptEdited:
    prompt: str


@dataclass(frozen=True)
class ImageSelected:
    image: EncodedImage


@dataclass(frozen=True)
class ImageCleared:
    pass


@dataclass(frozen=True)
class IngestionFailed:
    message: str


@dataclass(frozen=True)
class SubmitRejected:
    message: str


@dataclass(frozen=True)
class SubmitStarted:
    pass


@dataclass(frozen=True)
class SubmitSucceeded:
    result: AnalysisResult


@dataclass(frozen=True)
class SubmitFailed:
    message: str


FormAction = (
    PromptEdited
    | ImageSelected
    | ImageCleared
    | IngestionFailed
    | SubmitRejected
    | SubmitStarted
    | SubmitSucceeded
    | SubmitFailed
)
