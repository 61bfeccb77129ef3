from tenpin.exceptions import (
    DomainException,
    GameOver,
    InvalidArgument,
    InvalidRoll,
    ProblemDetail,
    UserNotFound,
)


def test_invalid_roll_is_value_error():
    exc = InvalidRoll("Pins must be between 0 and 10.")
    assert isinstance(exc, DomainException)
    assert isinstance(exc, ValueError)
    assert str(exc) == "Pins must be between 0 and 10."


def test_game_over_problem():
    problem = GameOver().to_problem()
    assert isinstance(problem, ProblemDetail)
    assert problem.model_dump() == {
        "title": "Game over",
        "detail": "cannot roll after game is over",
        "code": "game_over",
    }


def test_error_kinds_have_distinct_codes():
    codes = {
        InvalidRoll("x").code,
        GameOver().code,
        InvalidArgument("x").code,
        UserNotFound("u").code,
    }
    assert codes == {"invalid_roll", "game_over", "invalid_argument", "user_not_found"}
    assert isinstance(UserNotFound("u"), LookupError)
    assert isinstance(GameOver(), RuntimeError)
