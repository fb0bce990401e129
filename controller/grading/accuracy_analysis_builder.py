from __future__ import annotations

from typing import List, Optional, Set

from controller.grading.feedback import feedback_for
from controller.grading.scoring import (
    FUZZY_MATCH_THRESHOLD,
    accuracy_from_matches,
    match_tokens,
)
from controller.grading.text_align import tokenize
from schemas.accuracy_analysis import (
    AccuracyAnalysis,
    MatchedWord,
    MatchingMeta,
    Token,
)


def build_accuracy_analysis(
    expected_text: Optional[str],
    actual_text: Optional[str],
) -> AccuracyAnalysis:
    expected_text = expected_text or ""
    actual_text = actual_text or ""
    expected_tokens = tokenize(expected_text)
    actual_tokens = tokenize(actual_text)

    # an empty side scores 0 without matching
    if expected_tokens and actual_tokens:
        word_matches = match_tokens(expected_tokens, actual_tokens)
    else:
        word_matches = []

    matched_words: List[MatchedWord] = [
        MatchedWord(
            kind=m.kind,
            expected_idx=m.expected_idx,
            actual_idx=m.actual_idx,
            expected=expected_tokens[m.expected_idx],
            actual=actual_tokens[m.actual_idx],
            similarity=m.similarity,
        )
        for m in sorted(word_matches, key=lambda m: m.expected_idx)
    ]
    matched_expected: Set[int] = {m.expected_idx for m in word_matches}
    used_actual: Set[int] = {m.actual_idx for m in word_matches}

    expected_token_models = [Token(idx=i, text=t) for i, t in enumerate(expected_tokens)]
    actual_token_models = [Token(idx=i, text=t) for i, t in enumerate(actual_tokens)]

    accuracy = accuracy_from_matches(len(word_matches), len(expected_tokens))

    return AccuracyAnalysis(
        expected_text=expected_text,
        actual_text=actual_text,
        matching_meta=MatchingMeta(fuzzy_threshold=FUZZY_MATCH_THRESHOLD),
        expected_tokens=expected_token_models,
        actual_tokens=actual_token_models,
        matches=matched_words,
        missed_words=[t for t in expected_token_models if t.idx not in matched_expected],
        extra_words=[t for t in actual_token_models if t.idx not in used_actual],
        exact_count=sum(1 for m in word_matches if m.kind == "exact"),
        fuzzy_count=sum(1 for m in word_matches if m.kind == "fuzzy"),
        accuracy=accuracy,
        feedback=feedback_for(accuracy),
    )
