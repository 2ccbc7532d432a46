"""Dictionary fallback translator.

Used when no external provider produced a translation. Lookup runs in two
tiers: the whole (lowercased) text as a fixed phrase first, then word by word
with trailing punctuation carried over. When nothing at all matches, a
clearly marked placeholder is returned instead of the untouched input.
"""
import logging
from types import MappingProxyType

from tribalbridge.constants.dictionary import DICTIONARY_ENTRIES
from tribalbridge.constants.languages import get_language_display_name

logger = logging.getLogger(__name__)

TRAILING_PUNCTUATION = '.,!?;:'

PLACEHOLDER_TEMPLATE = '[{target} rendering]: {text} - (Cultural context preserved from {source})'

_EMPTY = MappingProxyType({})


class DictionaryTable:
    """Read-only source -> target -> phrase -> translation mapping."""

    def __init__(self, entries):
        pairs = {}
        for source, targets in entries.items():
            for target, words in targets.items():
                pairs[(source, target)] = MappingProxyType(
                    {key.strip().lower(): value for key, value in words.items()}
                )
        self._pairs = MappingProxyType(pairs)

    @classmethod
    def default(cls):
        return cls(DICTIONARY_ENTRIES)

    def entries_for(self, source, target):
        return self._pairs.get((source, target), _EMPTY)

    def has_pair(self, source, target):
        return (source, target) in self._pairs

    def supported_pairs(self):
        return sorted(self._pairs.keys())

    def __len__(self):
        return sum(len(words) for words in self._pairs.values())


def split_trailing_punctuation(token):
    """Split ``token`` into (word, trailing punctuation)."""
    word = token.rstrip(TRAILING_PUNCTUATION)
    return word, token[len(word):]


class DictionaryEngine:
    """Phrase-then-word substitution over an injected ``DictionaryTable``."""

    def __init__(self, table, display_name=get_language_display_name):
        self.table = table
        self.display_name = display_name

    def translate(self, source_lang: str, target_lang: str, text: str) -> str:
        """Translate ``text``; never returns an empty string for non-empty input."""
        normalized = text.strip().lower()
        entries = self.table.entries_for(source_lang, target_lang)

        # Fixed phrases and greetings match on the whole string first
        phrase = entries.get(normalized)
        if phrase:
            return phrase

        tokens = normalized.split()
        translated_tokens = [self._translate_token(token, entries) for token in tokens]

        if any(self._changed(before, after) for before, after in zip(tokens, translated_tokens)):
            return ' '.join(translated_tokens)

        logger.debug(f"Dictionary miss for {source_lang}->{target_lang}, using placeholder")
        return self.placeholder(source_lang, target_lang, text)

    def placeholder(self, source_lang, target_lang, text):
        return PLACEHOLDER_TEMPLATE.format(
            target=self.display_name(target_lang),
            text=text,
            source=self.display_name(source_lang),
        )

    @staticmethod
    def _translate_token(token, entries):
        word, punctuation = split_trailing_punctuation(token)
        translation = entries.get(word) if word else None
        if translation:
            return translation + punctuation
        return token

    @staticmethod
    def _changed(before, after):
        return (
            before != after
            and split_trailing_punctuation(before)[0] != split_trailing_punctuation(after)[0]
        )
