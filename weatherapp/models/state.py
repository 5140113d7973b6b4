"""Fetch state tagged union published by the fetch controller."""

from dataclasses import dataclass
from enum import StrEnum

from weatherapp.models.forecast import ForecastResult


class StateKind(StrEnum):
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class FetchState:
    """Exactly one variant is active; only that variant's payload is set.

    Build instances with the ``loading``/``success``/``error`` constructors and
    branch on ``kind`` with a ``match`` closed by ``assert_never``.
    """

    kind: StateKind
    result: ForecastResult | None = None
    message: str | None = None

    def __post_init__(self) -> None:
        if self.kind == StateKind.LOADING:
            valid = self.result is None and self.message is None
        elif self.kind == StateKind.SUCCESS:
            valid = self.result is not None and self.message is None
        else:
            valid = self.result is None and self.message is not None
        if not valid:
            raise ValueError(f"Invalid payload for {self.kind} state")

    @classmethod
    def loading(cls) -> "FetchState":
        return cls(StateKind.LOADING)

    @classmethod
    def success(cls, result: ForecastResult) -> "FetchState":
        return cls(StateKind.SUCCESS, result=result)

    @classmethod
    def error(cls, message: str) -> "FetchState":
        return cls(StateKind.ERROR, message=message)
