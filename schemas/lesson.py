from typing import List

from pydantic import AliasChoices, BaseModel, Field
import time


class CaptionItem(BaseModel):
    """One caption line as delivered by the captioning source (seconds)."""

    text: str
    offset: float = Field(validation_alias=AliasChoices("offset", "start"))
    duration: float = 0.0


class CaptionSegment(BaseModel):
    id: int
    time: int
    subtitle: str
    duration: float
    end: int


class PausePoint(BaseModel):
    id: int
    time: float = Field(ge=0)
    subtitle: str


class LessonBase(BaseModel):
    title: str
    video_id: str = Field(
        validation_alias=AliasChoices("video_id", "videoId"),
        serialization_alias="videoId",
    )
    video_url: str = Field(
        validation_alias=AliasChoices("video_url", "videoUrl"),
        serialization_alias="videoUrl",
    )
    pauses: List[PausePoint]


class LessonCreate(LessonBase):
    is_public: bool = Field(default=True, serialization_alias="isPublic")
    date_created: int = Field(default_factory=lambda: int(time.time()), serialization_alias="dateCreated")
