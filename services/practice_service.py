# ============================================================================
# PRACTICE SERVICE
# ============================================================================
# Drives one shadowing run through a lesson: playback stops at each pause
# point, the learner's transcript is scored against the caption, and the
# learner either retries or moves on. Video control and speech recognition
# happen on the client; this module only keeps the run's state.
# ============================================================================

import logging
from typing import Optional, Sequence

from fastapi import HTTPException

import core.config as config
from controller.grading.accuracy_analysis_builder import build_accuracy_analysis
from controller.grading.feedback import feedback_for
from controller.grading.scoring import round_half_up
from schemas.lesson import LessonBase, PausePoint
from schemas.practice import PracticeResult, PracticeSession, PracticeSummary

logger = logging.getLogger(__name__)


def _check_length(label: str, text: str) -> None:
    limit = config.SCORING_MAX_INPUT_CHARS
    if len(text) > limit:
        raise HTTPException(
            status_code=413,
            detail=f"{label} is too long ({len(text)} characters, limit {limit}).",
        )


def start_practice(lesson: LessonBase) -> PracticeSession:
    """Creates a PracticeSession positioned on the lesson's first pause point.

    Raises:
        HTTPException 400: Lesson has no pause points
    """
    if not lesson.pauses:
        raise HTTPException(status_code=400, detail="Lesson has no pause points to practice.")
    pauses = sorted(lesson.pauses, key=lambda pause: pause.time)
    return PracticeSession(video_id=lesson.video_id, pauses=pauses)


def pause_due(
    session: PracticeSession, current_time: float, tolerance: Optional[float] = None
) -> bool:
    tolerance = config.PRACTICE_PAUSE_TOLERANCE_SECONDS if tolerance is None else tolerance
    pause = session.current_pause
    return pause is not None and current_time >= pause.time - tolerance


def seek_time_for(pause: PausePoint, lead: Optional[float] = None) -> float:
    lead = config.PRACTICE_SEEK_LEAD_SECONDS if lead is None else lead
    return max(0.0, pause.time - lead)


def score_transcript(expected_text: str, transcript: str, pause_id: int = 0) -> PracticeResult:
    """Scores one transcript against the expected caption text.

    Raises:
        HTTPException 413: Either text exceeds SCORING_MAX_INPUT_CHARS
    """
    expected_text = expected_text or ""
    transcript = transcript or ""
    _check_length("Expected text", expected_text)
    _check_length("Transcript", transcript)

    analysis = build_accuracy_analysis(expected_text, transcript)
    return PracticeResult(
        pause_id=pause_id,
        accuracy=analysis.accuracy,
        user_text=transcript,
        expected_text=expected_text,
        feedback=analysis.feedback,
        analysis=analysis,
    )


def record_attempt(session: PracticeSession, transcript: str) -> PracticeResult:
    """Scores the transcript for the current pause point and stores the result.

    Raises:
        HTTPException 409: Session already completed
        HTTPException 413: Transcript too long
    """
    pause = session.current_pause
    if pause is None:
        raise HTTPException(status_code=409, detail="Practice session is already completed.")

    result = score_transcript(pause.subtitle, transcript, pause_id=pause.id)
    session.results.append(result)
    logger.info(
        "Pause %s scored %s%% (%d/%d attempts recorded).",
        pause.id,
        result.accuracy,
        len(session.results),
        len(session.pauses),
    )
    return result


def retry_last(session: PracticeSession) -> PracticeResult:
    """Drops the most recent result so the current pause point can be tried again.

    Raises:
        HTTPException 400: Nothing to retry
        HTTPException 409: Last attempt belongs to an earlier pause point
    """
    if not session.results:
        raise HTTPException(status_code=400, detail="There is no attempt to retry.")
    pause = session.current_pause
    if pause is None or session.results[-1].pause_id != pause.id:
        raise HTTPException(
            status_code=409,
            detail="Only the attempt at the current pause point can be retried.",
        )
    dropped = session.results.pop()
    logger.info("Retrying pause %s; discarded attempt scored %s%%.", dropped.pause_id, dropped.accuracy)
    return dropped


def advance(session: PracticeSession) -> Optional[PausePoint]:
    """Moves to the next pause point, or completes the session after the last one."""
    if session.completed:
        return None
    if session.current_index < len(session.pauses) - 1:
        session.current_index += 1
        return session.pauses[session.current_index]
    session.completed = True
    logger.info(
        "Practice on video %s completed with average accuracy %s%%.",
        session.video_id,
        average_accuracy(session.results),
    )
    return None


def average_accuracy(results: Sequence[PracticeResult]) -> int:
    if not results:
        return 0
    return round_half_up(sum(result.accuracy for result in results) / len(results))


def summarize(session: PracticeSession) -> PracticeSummary:
    average = average_accuracy(session.results)
    return PracticeSummary(
        video_id=session.video_id,
        attempts=len(session.results),
        average_accuracy=average,
        completed=session.completed,
        feedback=feedback_for(average),
    )
