from typing import List, Tuple

from schemas.accuracy_analysis import FeedbackBand


_COLOR_BANDS: List[Tuple[int, str]] = [
    (80, "text-green-600"),
    (60, "text-yellow-600"),
]
_LOW_COLOR = "text-red-600"

_MESSAGE_BANDS: List[Tuple[int, str]] = [
    (90, "Excellent! 🎉"),
    (80, "Great job! 👍"),
    (70, "Good work! 👌"),
    (60, "Not bad, keep practicing! 💪"),
]
_LOW_MESSAGE = "Keep practicing, you'll improve! 📚"


def accuracy_color(accuracy: int) -> str:
    for floor, color in _COLOR_BANDS:
        if accuracy >= floor:
            return color
    return _LOW_COLOR


def accuracy_message(accuracy: int) -> str:
    for floor, message in _MESSAGE_BANDS:
        if accuracy >= floor:
            return message
    return _LOW_MESSAGE


def feedback_for(accuracy: int) -> FeedbackBand:
    return FeedbackBand(
        accuracy=accuracy,
        color=accuracy_color(accuracy),
        message=accuracy_message(accuracy),
    )
