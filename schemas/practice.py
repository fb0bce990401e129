from typing import List, Optional

from pydantic import BaseModel, Field

from schemas.accuracy_analysis import AccuracyAnalysis, FeedbackBand
from schemas.lesson import PausePoint


class PracticeResult(BaseModel):
    pause_id: int = Field(serialization_alias="pauseId")
    accuracy: int = Field(ge=0, le=100)
    user_text: str = Field(serialization_alias="userText")
    expected_text: str = Field(serialization_alias="expectedText")
    feedback: FeedbackBand
    analysis: Optional[AccuracyAnalysis] = None


class PracticeSession(BaseModel):
    video_id: str = Field(serialization_alias="videoId")
    pauses: List[PausePoint]
    current_index: int = Field(default=0, serialization_alias="currentIndex")
    results: List[PracticeResult] = Field(default_factory=list)
    completed: bool = False

    @property
    def current_pause(self) -> Optional[PausePoint]:
        if self.completed or self.current_index >= len(self.pauses):
            return None
        return self.pauses[self.current_index]


class PracticeSummary(BaseModel):
    video_id: str = Field(serialization_alias="videoId")
    attempts: int
    average_accuracy: int = Field(serialization_alias="averageAccuracy")
    completed: bool
    feedback: FeedbackBand
