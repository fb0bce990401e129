import os

from dotenv import load_dotenv

load_dotenv()


SCORING_MAX_INPUT_CHARS = int(os.getenv("SCORING_MAX_INPUT_CHARS", "2000"))
PAUSE_POINT_LIMIT = int(os.getenv("PAUSE_POINT_LIMIT", "8"))
PAUSE_POINT_MIN_GAP_SECONDS = float(os.getenv("PAUSE_POINT_MIN_GAP_SECONDS", "2"))
PRACTICE_SEEK_LEAD_SECONDS = float(os.getenv("PRACTICE_SEEK_LEAD_SECONDS", "2"))
PRACTICE_PAUSE_TOLERANCE_SECONDS = float(os.getenv("PRACTICE_PAUSE_TOLERANCE_SECONDS", "0.5"))
