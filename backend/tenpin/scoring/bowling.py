"""Ten-pin bowling scoring engine.

A :class:`Game` owns ten :class:`Frame` objects and routes each roll to the
frame currently in play. Bonuses for strikes and spares are never stored on the
frames; :meth:`Game.score` derives them from the recorded rolls every time it
is called, so scoring an unfinished game simply yields a lower bound.
"""
import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ..exceptions import GameOver, InvalidRoll
from ..services.validation import MAX_PINS, validate_pins

logger = logging.getLogger(__name__)

FRAMES_PER_GAME = 10
LAST_FRAME_INDEX = FRAMES_PER_GAME - 1


@dataclass(eq=True)
class Frame:
    # mutable: compared by value, deliberately unhashable
    rolls: List[int] = field(default_factory=list)
    is_last_frame: bool = False

    def add_roll(self, pins: int) -> None:
        pins = validate_pins(pins)
        if self.is_complete:
            raise InvalidRoll("frame is already complete")
        if pins > self.pins_remaining:
            raise InvalidRoll("Cannot knock down more pins than available")
        self.rolls.append(pins)

    @property
    def pins_remaining(self) -> int:
        if not self.rolls:
            return MAX_PINS
        if not self.is_last_frame:
            return MAX_PINS - sum(self.rolls)
        # tenth frame: the rack is reset after a strike or a spare
        standing = MAX_PINS
        for pins in self.rolls:
            standing -= pins
            if standing == 0:
                standing = MAX_PINS
        return standing

    @property
    def is_strike(self) -> bool:
        return bool(self.rolls) and self.rolls[0] == MAX_PINS

    @property
    def is_spare(self) -> bool:
        return (
            len(self.rolls) >= 2
            and self.rolls[0] + self.rolls[1] == MAX_PINS
            and not self.is_strike
        )

    @property
    def is_complete(self) -> bool:
        if self.is_last_frame:
            if self.is_strike or self.is_spare:
                return len(self.rolls) >= 3
            return len(self.rolls) >= 2
        return self.is_strike or len(self.rolls) >= 2

    def score(self) -> int:
        """Pins knocked down in this frame, without any bonus."""
        return sum(self.rolls)

    def __str__(self) -> str:
        marks = []
        for i, pins in enumerate(self.rolls):
            if pins == MAX_PINS:
                marks.append("X")
            elif i == 1 and self.rolls[0] + pins == MAX_PINS:
                marks.append("/")
            else:
                marks.append(str(pins))
        return "[" + ", ".join(marks) + "]"


def _following_rolls(frames: List[Frame], index: int) -> List[int]:
    rolls: List[int] = []
    for frame in frames[index + 1 :]:
        rolls.extend(frame.rolls)
    return rolls


def _frame_bonus(frames: List[Frame], index: int) -> int:
    frame = frames[index]
    if frame.is_last_frame:
        # fill balls are already part of the tenth frame's raw pins
        return 0
    if frame.is_strike:
        return sum(_following_rolls(frames, index)[:2])
    if frame.is_spare:
        return sum(_following_rolls(frames, index)[:1])
    return 0


def frame_scores(frames: List[Frame]) -> List[int]:
    """Score each frame as raw pins plus any strike or spare bonus.

    Missing look-ahead rolls count as zero.
    """
    return [
        frame.score() + _frame_bonus(frames, i) for i, frame in enumerate(frames)
    ]


class Game:
    def __init__(self) -> None:
        self._frames = [
            Frame(is_last_frame=(i == LAST_FRAME_INDEX))
            for i in range(FRAMES_PER_GAME)
        ]
        self.current_frame_index = 0
        self.current_roll_index = 0

    @property
    def frames(self) -> List[Frame]:
        return list(self._frames)

    @property
    def current_frame(self) -> int:
        return self.current_frame_index + 1

    @property
    def current_roll(self) -> int:
        return self.current_roll_index + 1

    @property
    def is_over(self) -> bool:
        if self.current_frame_index < LAST_FRAME_INDEX:
            return False
        last = self._frames[LAST_FRAME_INDEX]
        if last.is_strike or last.is_spare:
            return len(last.rolls) >= 3
        return len(last.rolls) >= 2

    def roll(self, pins: int) -> None:
        pins = validate_pins(pins)
        if self.is_over:
            raise GameOver()

        frame = self._frames[self.current_frame_index]
        frame.add_roll(pins)
        self.current_roll_index += 1

        if frame.is_complete and self.current_frame_index < LAST_FRAME_INDEX:
            logger.debug(
                "Frame %d complete %s; advancing", self.current_frame, frame
            )
            self.current_frame_index += 1
            self.current_roll_index = 0
        elif self.is_over:
            logger.info("Game over with score %d", self.score())

    def frame_scores(self) -> List[int]:
        return frame_scores(self._frames)

    def score(self) -> int:
        return sum(self.frame_scores())

    def game_state(self) -> str:
        return " | ".join(
            f"Frame {i}: {frame}" for i, frame in enumerate(self._frames, start=1)
        )

    def summary(self) -> Dict:
        scores = self.frame_scores()
        cumulative = []
        total = 0
        for s in scores:
            total += s
            cumulative.append(total)
        return {
            "frames": [list(f.rolls) for f in self._frames],
            "scores": scores,
            "cumulative": cumulative,
            "total": total,
            "currentFrame": self.current_frame,
            "currentRoll": self.current_roll,
            "gameOver": self.is_over,
        }
