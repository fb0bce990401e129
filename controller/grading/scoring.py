import math
from dataclasses import dataclass
from typing import List, Literal, Optional

from controller.grading.text_align import tokenize, word_similarity


FUZZY_MATCH_THRESHOLD = 0.6


@dataclass(frozen=True)
class WordMatch:
    expected_idx: int
    actual_idx: int
    kind: Literal["exact", "fuzzy"]
    similarity: float


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def match_tokens(expected: List[str], actual: List[str]) -> List[WordMatch]:
    """Greedy two-pass matching of expected tokens onto actual tokens.

    The exact pass runs over every expected token first, so an exact match
    later in the sentence wins over a fuzzy match earlier on. Each actual
    token is claimed at most once and each expected token matches at most once.
    """
    used = [False] * len(actual)
    matched = [False] * len(expected)
    matches: List[WordMatch] = []

    for i, expected_word in enumerate(expected):
        for j, actual_word in enumerate(actual):
            if not used[j] and actual_word == expected_word:
                used[j] = True
                matched[i] = True
                matches.append(WordMatch(i, j, "exact", 1.0))
                break

    for i, expected_word in enumerate(expected):
        if len(matches) >= len(expected):
            break
        if matched[i]:
            continue
        for j, actual_word in enumerate(actual):
            if used[j]:
                continue
            similarity = word_similarity(expected_word, actual_word)
            if similarity > FUZZY_MATCH_THRESHOLD:
                used[j] = True
                matched[i] = True
                matches.append(WordMatch(i, j, "fuzzy", similarity))
                break

    return matches


def accuracy_from_matches(match_count: int, expected_count: int) -> int:
    if expected_count <= 0:
        return 0
    return round_half_up(min(100.0, match_count / expected_count * 100))


def compute_accuracy(expected_text: Optional[str], actual_text: Optional[str]) -> int:
    if not expected_text or not actual_text:
        return 0
    expected_tokens = tokenize(expected_text)
    if not expected_tokens:
        return 0
    actual_tokens = tokenize(actual_text)
    matches = match_tokens(expected_tokens, actual_tokens)
    return accuracy_from_matches(len(matches), len(expected_tokens))
