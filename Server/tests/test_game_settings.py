import json

import pytest

from wordle.config.game_settings import (
    get_word_statistics, load_word_list, validate_word_list_integrity
)


def test_bundled_word_list_is_valid():
    words = load_word_list()
    assert validate_word_list_integrity(words)
    assert {"LLAMA", "ALLOY", "CRANE"} <= set(words)
    assert all(len(word) == 5 for word in words)


def test_load_uppercases_and_deduplicates(tmp_path):
    path = tmp_path / 'words.json'
    path.write_text(json.dumps(["crane", "Slate", "CRANE", "planet"]), encoding='utf-8')

    assert load_word_list(str(path)) == ["CRANE", "SLATE", "PLANET"]


@pytest.mark.parametrize('content', ['{"words": []}', '[]', '["cr4ne"]', '[1, 2]', 'not json'])
def test_load_rejects_bad_files(tmp_path, content):
    path = tmp_path / 'words.json'
    path.write_text(content, encoding='utf-8')

    with pytest.raises(ValueError):
        load_word_list(str(path))


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(str(tmp_path / 'missing.json'))


def test_integrity_rejects_duplicates_and_lowercase():
    with pytest.raises(ValueError, match='Duplicate'):
        validate_word_list_integrity(["CRANE", "CRANE"])
    with pytest.raises(ValueError, match='uppercase'):
        validate_word_list_integrity(["crane"])


def test_word_statistics():
    stats = get_word_statistics(["CRANE", "SLATE", "PLANET"])
    assert stats['total_words'] == 3
    assert stats['words_by_length'] == {5: 2, 6: 1}
    assert ('A', 3) in stats['most_common_letters']
