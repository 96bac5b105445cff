from dataclasses import dataclass
from datetime import datetime
from typing import Literal

RequestStatus = Literal["idle", "in_flight", "succeeded", "failed"]


@dataclass(frozen=True)
class AnalysisResult:
    text: str
    produced_at: datetime


@dataclass(frozen=True)
class RequestState:
    """Lifecycle of the analysis request. Exactly one status is active."""

    status: RequestStatus = "idle"
    result: AnalysisResult | None = None
    error_message: str | None = None

    @classmethod
    def idle(cls) -> "RequestState":
        return cls()

    @classmethod
    def in_flight(cls) -> "RequestState":
        return cls(status="in_flight")

    @classmethod
    def succeeded(cls, result: AnalysisResult) -> "RequestState":
        return cls(status="succeeded", result=result)

    @classmethod
    def failed(cls, error_message: str) -> "RequestState":
        return cls(status="failed", error_message=error_message)

    @property
    def is_in_flight(self) -> bool:
        return self.status == "in_flight"
