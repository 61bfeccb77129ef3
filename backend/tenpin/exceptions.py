from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """Structured error payload reported to callers."""

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
    ) -> None:
        super().__init__(detail or title)
        self.title = title
        self.detail = detail
        self.code = code

    def to_problem(self) -> ProblemDetail:
        return ProblemDetail(title=self.title, detail=self.detail, code=self.code)


class InvalidRoll(DomainException, ValueError):
    def __init__(self, detail: str) -> None:
        super().__init__(
            title="Invalid roll",
            detail=detail,
            code="invalid_roll",
        )


class GameOver(DomainException, RuntimeError):
    """Raised when a roll is recorded after the tenth frame has finished."""

    def __init__(self) -> None:
        super().__init__(
            title="Game over",
            detail="cannot roll after game is over",
            code="game_over",
        )


class InvalidArgument(DomainException, ValueError):
    def __init__(self, detail: str) -> None:
        super().__init__(
            title="Invalid argument",
            detail=detail,
            code="invalid_argument",
        )


class UserNotFound(DomainException, LookupError):
    def __init__(self, user_id: str) -> None:
        super().__init__(
            title="User not found",
            detail=f"user '{user_id}' not found",
            code="user_not_found",
        )
