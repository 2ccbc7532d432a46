"""
Tests for the dictionary fallback translator.
"""

import pytest

from tribalbridge.services.dictionary import (
    DictionaryEngine,
    DictionaryTable,
    split_trailing_punctuation,
)


class TestPhraseLookup:
    """Whole-string matches win over word-by-word substitution."""

    def test_phrase_beats_words_mixed_case(self, dictionary_engine):
        assert dictionary_engine.translate('en', 'gon', 'Good Morning') == 'सुप्रभात'

    def test_phrase_with_surrounding_whitespace(self, dictionary_engine):
        assert dictionary_engine.translate('en', 'gon', '   good morning  ') == 'सुप्रभात'

    def test_table_keys_are_case_folded(self):
        engine = DictionaryEngine(DictionaryTable({'nav': {'en': {"Yá'át'ééh": 'hello'}}}))

        assert engine.translate('nav', 'en', "yá'át'ééh") == 'hello'


class TestWordByWord:
    """Word-level fallback with punctuation preservation."""

    def test_trailing_punctuation_is_reattached(self, dictionary_engine):
        assert dictionary_engine.translate('en', 'gon', 'water!') == 'पानी!'

    def test_sentence_with_comma_and_question_mark(self, dictionary_engine):
        result = dictionary_engine.translate('en', 'gon', 'Hello, how are you?')

        assert result == 'नमस्कार, कैसे हो तुम?'

    def test_unknown_words_kept_lowercased(self, dictionary_engine):
        result = dictionary_engine.translate('en', 'gon', 'Water please')

        assert result == 'पानी please'

    def test_multiple_trailing_punctuation(self, dictionary_engine):
        assert dictionary_engine.translate('en', 'gon', 'water?!') == 'पानी?!'

    def test_punctuation_only_token_is_untouched(self, dictionary_engine):
        assert dictionary_engine.translate('en', 'gon', 'water ?') == 'पानी ?'

    def test_whitespace_runs_collapse_to_single_space(self, dictionary_engine):
        assert dictionary_engine.translate('en', 'gon', 'hello\t\n water') == 'नमस्कार पानी'


class TestPlaceholder:
    """Total misses produce the marked placeholder, never the raw input."""

    def test_untranslatable_text(self, dictionary_engine):
        result = dictionary_engine.translate('en', 'gon', 'Quantum entanglement')

        assert result == (
            '[Gondi rendering]: Quantum entanglement - '
            '(Cultural context preserved from English)'
        )

    def test_unknown_target_uses_uppercased_code(self, dictionary_engine):
        result = dictionary_engine.translate('en', 'xx', 'Unmapped phrase')

        assert 'XX' in result
        assert 'Unmapped phrase' in result
        assert 'English' in result

    def test_placeholder_keeps_text_verbatim(self, dictionary_engine):
        result = dictionary_engine.translate('en', 'gon', '  Zzz qqq ')

        assert '  Zzz qqq ' in result
        assert result.startswith('[Gondi rendering]:')

    def test_same_source_and_target_is_deterministic(self, dictionary_engine):
        first = dictionary_engine.translate('en', 'en', 'hello')
        second = dictionary_engine.translate('en', 'en', 'hello')

        assert first == second
        assert first.startswith('[English rendering]')


class TestPurity:

    def test_identical_calls_give_identical_output(self, dictionary_engine):
        text = 'Hello, how are you today?'

        assert dictionary_engine.translate('en', 'gon', text) == dictionary_engine.translate('en', 'gon', text)

    def test_table_cannot_be_mutated(self):
        table = DictionaryTable({'en': {'gon': {'water': 'पानी'}}})

        with pytest.raises(TypeError):
            table.entries_for('en', 'gon')['water'] = 'x'


class TestDefaultTable:
    """The embedded dictionary shipped with the service."""

    def test_default_table_covers_reverse_pairs(self):
        table = DictionaryTable.default()

        assert table.has_pair('en', 'gon')
        assert table.has_pair('gon', 'en')
        assert ('en', 'sat') in table.supported_pairs()
        assert len(table) > 100

    def test_example_sentence_against_default_table(self):
        engine = DictionaryEngine(DictionaryTable.default())

        assert engine.translate('en', 'gon', 'Hello, how are you?') == 'नमस्कार, कैसे हो तुम?'

    def test_phrase_including_question_mark(self):
        engine = DictionaryEngine(DictionaryTable.default())

        assert engine.translate('en', 'hi', 'How are you?') == 'आप कैसे हैं?'


@pytest.mark.parametrize('token,expected', [
    ('water', ('water', '')),
    ('water!', ('water', '!')),
    ('you?!', ('you', '?!')),
    ('e.g.', ('e.g', '.')),
    ('...', ('', '...')),
])
def test_split_trailing_punctuation(token, expected):
    assert split_trailing_punctuation(token) == expected
