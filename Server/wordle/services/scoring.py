"""
Guess Scoring

Pure functions for evaluating guesses. No game state lives here.
"""

from collections import Counter
from typing import Iterable, List

from ..models.game import LetterStatus, ScoredLetter
from .errors import InternalError

# Weight of a HIT when ranking feedback patterns; a PRESENT weighs 1.
HIT_WEIGHT = 6


def score_guess(guess: str, answer: str) -> List[ScoredLetter]:
    """
    Implements the authentic Wordle letter evaluation algorithm.

    Exact position matches are marked first so that duplicate letters in the
    guess can never claim more HIT/PRESENT verdicts than the answer holds.

    Args:
        guess: Normalized guess word
        answer: Normalized answer word of the same length

    Returns:
        List of ScoredLetter, one per guess position
    """
    if len(guess) != len(answer):
        raise InternalError(
            f"Cannot score a {len(guess)}-letter guess against a {len(answer)}-letter answer"
        )

    remaining = Counter(answer)
    verdicts: List[LetterStatus] = [LetterStatus.PENDING] * len(guess)

    # First pass: exact matches consume their letter
    for i, letter in enumerate(guess):
        if letter == answer[i]:
            verdicts[i] = LetterStatus.HIT
            remaining[letter] -= 1

    # Second pass: wrong-position matches from whatever is left
    for i, letter in enumerate(guess):
        if verdicts[i] is LetterStatus.HIT:
            continue
        if remaining[letter] > 0:
            verdicts[i] = LetterStatus.PRESENT
            remaining[letter] -= 1
        else:
            verdicts[i] = LetterStatus.MISS

    return [ScoredLetter(letter, verdict) for letter, verdict in zip(guess, verdicts)]


def hit_weight_for(word_length: int) -> int:
    """Smallest usable HIT weight: one HIT must outrank a row full of PRESENTs."""
    return max(HIT_WEIGHT, word_length + 1)


def helpfulness(pattern: Iterable[ScoredLetter], hit_weight: int = HIT_WEIGHT) -> int:
    """Scalar measure of how much a feedback pattern tells the player."""
    score = 0
    for letter in pattern:
        if letter.verdict is LetterStatus.HIT:
            score += hit_weight
        elif letter.verdict is LetterStatus.PRESENT:
            score += 1
    return score
