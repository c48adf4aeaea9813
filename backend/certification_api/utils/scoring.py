"""
Score extraction from free-text model evaluations.

The model is asked to answer with a line of the form ``Score: X/10``. The
captured value is returned as-is, without clamping to 0-10.
"""
import re
from typing import Optional

SCORE_PATTERN = re.compile(r"Score:\s*(\d+)/10")

PASSING_SCORE = 5


def extract_score(text: Optional[str]) -> int:
    """Return the first ``Score: X/10`` value found in text, or 0."""
    if not text:
        return 0
    match = SCORE_PATTERN.search(text)
    return int(match.group(1)) if match else 0


def is_passing(score: int) -> bool:
    return score >= PASSING_SCORE
