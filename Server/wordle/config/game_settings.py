"""
Game Configuration Constants Module

This module defines the game defaults and loads the word dictionary used both
for validating guesses and for picking answers and absurdle candidates.
"""

import json
import os
from collections import Counter
from typing import Final, List, Optional

# Core Game Configuration Constants
MAX_ROUNDS: Final[int] = 6
WORD_LENGTH: Final[int] = 5

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'wordles.json'
)


def load_word_list(path: Optional[str] = None) -> List[str]:
    """
    Load the word dictionary from a JSON array file.

    Args:
        path: Path to the JSON file; defaults to the bundled wordles.json

    Returns:
        List[str]: De-duplicated uppercase words in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    json_file_path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    words = []
    seen = set()
    for word in word_list:
        if not isinstance(word, str) or not word.isalpha():
            raise ValueError(f"Word '{word}' contains non-alphabetic characters")
        upper = word.upper()
        if upper not in seen:
            seen.add(upper)
            words.append(upper)

    return words


def validate_word_list_integrity(word_list: List[str]) -> bool:
    """
    Validates the integrity and consistency of a word database.

    This function performs validation to ensure:
    1. Character validation: Only alphabetic characters allowed
    2. Uniqueness validation: No duplicate entries
    3. Format validation: Consistent uppercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not word_list:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(word_list) != len(set(word_list)):
        duplicates = sorted(word for word, count in Counter(word_list).items() if count > 1)
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(word_list: List[str]) -> dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: total_words, words_by_length, avg_vowel_count, most_common_letters
    """
    if not word_list:
        return {"error": "Word list is empty"}

    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in word_list)
    letter_frequency = Counter(char for word in word_list for char in word)

    return {
        "total_words": len(word_list),
        "words_by_length": dict(sorted(Counter(len(word) for word in word_list).items())),
        "avg_vowel_count": round(total_vowels / len(word_list), 2),
        "most_common_letters": letter_frequency.most_common(5)
    }


if __name__ == "__main__":
    try:
        words = load_word_list()
        validate_word_list_integrity(words)
        print(" Word list validation passed")
        print(f" Game statistics: {get_word_statistics(words)}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        raise SystemExit(1)
