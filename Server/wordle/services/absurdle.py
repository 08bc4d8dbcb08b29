"""
Absurdle Feedback Selection

Chooses the least helpful feedback for a guess against a pool of words that
could still be the answer, and decides when the game must commit to one.
"""

from dataclasses import dataclass
from typing import FrozenSet, Iterable, List, Optional

from ..models.game import LetterStatus, ScoredLetter
from .errors import InternalError
from .scoring import helpfulness, hit_weight_for, score_guess


@dataclass(frozen=True)
class Selection:
    """Outcome of one absurdle round."""
    pattern: List[ScoredLetter]
    narrowed_pool: FrozenSet[str]
    resolved_answer: Optional[str] = None


def select_feedback(guess: str, pool: Iterable[str]) -> Selection:
    """
    Process a guess in Absurdle mode by finding the least helpful feedback.

    Every candidate is scored against the guess and ranked by helpfulness.
    Only the candidates with the minimum score survive. The selector keeps
    withholding information while at least two candidates would give the
    player nothing; otherwise it commits to a concrete answer, taking the
    alphabetically first candidate on ties, and reveals the real pattern.

    Args:
        guess: Normalized guess word
        pool: Non-empty collection of candidate answers

    Returns:
        Selection with the feedback pattern, surviving candidates and the
        committed answer if the game was forced to resolve

    Raises:
        InternalError: If the pool is empty
    """
    candidates = sorted(set(pool))
    if not candidates:
        raise InternalError("Invalid game state: no candidate words")

    weight = hit_weight_for(len(guess))
    scored = [(word, score_guess(guess, word)) for word in candidates]
    scores = [helpfulness(pattern, weight) for _, pattern in scored]
    min_score = min(scores)

    minimal = [(word, pattern) for (word, pattern), score in zip(scored, scores) if score == min_score]
    narrowed = frozenset(word for word, _ in minimal)

    if min_score == 0 and len(minimal) > 1:
        withheld = [ScoredLetter(letter, LetterStatus.MISS) for letter in guess]
        return Selection(pattern=withheld, narrowed_pool=narrowed)

    # Candidates are sorted, so the first minimal one is the lexicographic minimum
    answer, pattern = minimal[0]
    return Selection(pattern=pattern, narrowed_pool=narrowed, resolved_answer=answer)
