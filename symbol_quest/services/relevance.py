"""Question-to-card relevance scoring."""
import re
from typing import Dict, List, Sequence

MIN_TOKEN_LENGTH = 3
DEFAULT_SEMANTIC_WEIGHT = 0.5

# Theme -> question words that point at it. A card qualifies for a theme
# when one of its keywords contains the theme name.
SEMANTIC_THEMES: Dict[str, List[str]] = {
    "love": ["relationship", "romance", "partner", "dating", "heart", "marriage"],
    "career": ["work", "job", "profession", "business", "employment", "money"],
    "change": ["transition", "transformation", "new", "different", "shift"],
    "growth": ["development", "progress", "improvement", "learning", "evolve"],
    "decision": ["choice", "choose", "decide", "option", "path", "direction"],
    "spirituality": ["spiritual", "soul", "purpose", "meaning", "faith", "divine"],
    "creativity": ["creative", "art", "imagination", "inspiration", "express"],
    "health": ["wellness", "healing", "body", "mind", "energy", "balance"],
}

_NON_LETTERS = re.compile(r"[^a-z\s]")


def tokenize_question(question: str) -> List[str]:
    """Lowercase, drop everything but letters and whitespace, keep words of 3+ chars."""
    if not question:
        return []
    cleaned = _NON_LETTERS.sub("", question.lower())
    return [word for word in cleaned.split() if len(word) >= MIN_TOKEN_LENGTH]


def _overlaps(a: str, b: str) -> bool:
    return a in b or b in a


def count_direct_matches(tokens: Sequence[str], keywords: Sequence[str]) -> int:
    """Number of keywords that overlap (substring either way) with any token."""
    matches = 0
    for keyword in keywords:
        lowered = keyword.lower()
        if any(_overlaps(token, lowered) for token in tokens):
            matches += 1
    return matches


def count_semantic_matches(
    tokens: Sequence[str],
    keywords: Sequence[str],
    semantic_weight: float = DEFAULT_SEMANTIC_WEIGHT,
) -> float:
    """Weighted count of themes shared by the card keywords and the question."""
    lowered_keywords = [keyword.lower() for keyword in keywords]
    score = 0.0
    for theme, synonyms in SEMANTIC_THEMES.items():
        has_theme_keyword = any(theme in keyword for keyword in lowered_keywords)
        if not has_theme_keyword:
            continue
        has_question_synonym = any(
            _overlaps(token, synonym) for token in tokens for synonym in synonyms
        )
        if has_question_synonym:
            score += semantic_weight
    return score


def calculate_question_relevance(
    question: str,
    keywords: Sequence[str],
    semantic_weight: float = DEFAULT_SEMANTIC_WEIGHT,
) -> float:
    """
    Relevance multiplier of a card for a question.

    Returns a value in [1.0, 2.0]: 1.0 when nothing in the question relates
    to the keywords (or the question has no usable words), 2.0 when every
    possible match was found. Never below 1.0, so relevance can only boost
    a card.

    Args:
        question: Free-text question, may be empty
        keywords: Card keywords
        semantic_weight: Contribution of one theme match relative to a
            direct keyword match

    Returns:
        Relevance multiplier
    """
    tokens = tokenize_question(question)
    if not tokens:
        return 1.0

    direct = count_direct_matches(tokens, keywords)
    semantic = count_semantic_matches(tokens, keywords, semantic_weight)

    max_possible = max(min(len(keywords), len(tokens)), 1)
    return 1.0 + min((direct + semantic) / max_possible, 1.0)
