from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel, Field


class Token(BaseModel):
    idx: int
    text: str


class TokenizationMeta(BaseModel):
    lowercase: bool = True
    strip_punctuation: bool = True
    split_on_whitespace: bool = True


class MatchingMeta(BaseModel):
    algorithm: str = "greedy_two_pass"
    fuzzy_threshold: float = Field(default=0.6, serialization_alias="fuzzyThreshold")
    similarity: str = "levenshtein_ratio"


class MatchedWord(BaseModel):
    kind: Literal["exact", "fuzzy"]
    expected_idx: int = Field(serialization_alias="expectedIdx")
    actual_idx: int = Field(serialization_alias="actualIdx")
    expected: str
    actual: str
    similarity: float


class FeedbackBand(BaseModel):
    accuracy: int = Field(ge=0, le=100)
    color: str
    message: str


class AccuracyAnalysis(BaseModel):
    expected_text: str = Field(serialization_alias="expectedText")
    actual_text: str = Field(serialization_alias="actualText")
    tokenization_meta: TokenizationMeta = Field(
        default_factory=TokenizationMeta, serialization_alias="tokenizationMeta"
    )
    matching_meta: MatchingMeta = Field(
        default_factory=MatchingMeta, serialization_alias="matchingMeta"
    )
    expected_tokens: List[Token] = Field(serialization_alias="expectedTokens")
    actual_tokens: List[Token] = Field(serialization_alias="actualTokens")
    matches: List[MatchedWord]
    missed_words: List[Token] = Field(serialization_alias="missedWords")
    extra_words: List[Token] = Field(serialization_alias="extraWords")
    exact_count: int = Field(serialization_alias="exactCount")
    fuzzy_count: int = Field(serialization_alias="fuzzyCount")
    accuracy: int = Field(ge=0, le=100)
    feedback: FeedbackBand
