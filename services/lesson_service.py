# ============================================================================
# LESSON SERVICE
# ============================================================================
# Builds validated lesson records for the external lesson store. Storing,
# listing and deleting lessons is the store's job.
# ============================================================================

import logging
from typing import Iterable

from fastapi import HTTPException

from controller.pause_points.video_ref import get_youtube_video_id
from schemas.lesson import LessonCreate, PausePoint

logger = logging.getLogger(__name__)


def build_lesson(title: str, video_url: str, pauses: Iterable[PausePoint]) -> LessonCreate:
    """Validates the lesson fields and returns a LessonCreate ready to be stored.

    Raises:
        HTTPException 400: Blank title
        HTTPException 400: Invalid YouTube URL
        HTTPException 400: No pause points
    """
    title = (title or "").strip()
    if not title:
        raise HTTPException(status_code=400, detail="Lesson title is required.")

    video_id = get_youtube_video_id(video_url)
    if not video_id:
        raise HTTPException(status_code=400, detail="Invalid YouTube URL")

    ordered = sorted(pauses, key=lambda pause: pause.time)
    if not ordered:
        raise HTTPException(status_code=400, detail="A lesson needs at least one pause point.")

    logger.info("Built lesson %r for video %s with %d pause points.", title, video_id, len(ordered))
    return LessonCreate(
        title=title,
        video_id=video_id,
        video_url=video_url,
        pauses=ordered,
    )
