import re
from typing import List, Optional


# Anything that is neither a letter, a digit nor whitespace. "\w" also admits
# "_", which is punctuation here.
_PUNCT_RE = re.compile(r"[^\w\s]|_")


def tokenize(text: Optional[str]) -> List[str]:
    if not text:
        return []
    cleaned = _PUNCT_RE.sub("", text.lower())
    return [token for token in cleaned.split() if token]


def edit_distance(a: str, b: str) -> int:
    # rows follow b, columns follow a
    matrix = [[0] * (len(a) + 1) for _ in range(len(b) + 1)]
    for i in range(len(b) + 1):
        matrix[i][0] = i
    for j in range(len(a) + 1):
        matrix[0][j] = j
    for i in range(1, len(b) + 1):
        for j in range(1, len(a) + 1):
            if b[i - 1] == a[j - 1]:
                matrix[i][j] = matrix[i - 1][j - 1]
            else:
                matrix[i][j] = 1 + min(
                    matrix[i - 1][j - 1],
                    matrix[i][j - 1],
                    matrix[i - 1][j],
                )
    return matrix[len(b)][len(a)]


def word_similarity(a: str, b: str) -> float:
    if not a:
        return 1.0 if not b else 0.0
    if not b:
        return 0.0
    longest = max(len(a), len(b))
    return (longest - edit_distance(a, b)) / longest
