from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 shaped error payload."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code

    def problem(self) -> ProblemDetail:
        return ProblemDetail(
            type=self.type,
            title=self.title,
            detail=self.detail,
            code=self.code,
        )


class IncompleteGame(DomainException, LookupError):
    def __init__(self, frame: int, rolls_recorded: int) -> None:
        super().__init__(
            title="Incomplete game",
            detail=(
                f"frame {frame} cannot be scored with "
                f"{rolls_recorded} roll(s) recorded"
            ),
            code="incomplete_game",
        )
        self.frame = frame
        self.rolls_recorded = rolls_recorded


class InvalidRoll(DomainException, ValueError):
    def __init__(self, detail: str) -> None:
        super().__init__(
            title="Invalid roll",
            detail=detail,
            code="invalid_roll",
        )
