"""Translation orchestrator.

Resolves a single request by trying the configured providers strictly in
trust order (local model, OpenAI, Google) and falling back to the embedded
dictionary, which always produces text. Scores are a fixed policy per tier,
not a measurement of the output.

Signed-in requests are persisted before returning; a storage failure is
logged and the caller still gets the translation, just without an id.
"""
import logging
import time
from dataclasses import dataclass, asdict, replace
from typing import Optional, Sequence

from tribalbridge.services.dictionary import DictionaryEngine, DictionaryTable
from tribalbridge.services.errors import InputError
from tribalbridge.services.persistence import TranslationStore
from tribalbridge.services.providers import FAILED, build_adapters

logger = logging.getLogger(__name__)

DICTIONARY_PROVIDER = 'dictionary'

# (confidence, accuracy, efficiency)
PROVIDER_SCORES = (0.85, 0.88, 1.2)
DICTIONARY_SCORES = (0.75, 0.80, 1.5)


@dataclass(frozen=True)
class TranslationRequest:
    source_language_code: str
    target_language_code: str
    source_text: str
    user_id: Optional[str] = None
    translation_type: str = 'text'


@dataclass(frozen=True)
class TranslationResult:
    translated_text: str
    confidence: float
    accuracy: float
    efficiency: float
    processing_time_ms: int
    provider: str
    translation_id: Optional[int] = None

    def to_dict(self):
        return asdict(self)


class TranslationService:
    """Sequences provider adapters, then the dictionary, then persistence."""

    def __init__(self, adapters: Sequence, dictionary: DictionaryEngine, store: Optional[TranslationStore] = None,
                 clock=time.monotonic):
        self.adapters = tuple(adapters)
        self.dictionary = dictionary
        self.store = store
        self.clock = clock

    def translate(self, request: TranslationRequest) -> TranslationResult:
        started = self.clock()

        if not request.source_text or not request.source_text.strip():
            raise InputError('Source text must not be empty')

        translated_text, provider = self._resolve(request)
        if provider == DICTIONARY_PROVIDER:
            confidence, accuracy, efficiency = DICTIONARY_SCORES
        else:
            confidence, accuracy, efficiency = PROVIDER_SCORES

        result = TranslationResult(
            translated_text=translated_text,
            confidence=confidence,
            accuracy=accuracy,
            efficiency=efficiency,
            processing_time_ms=max(0, int((self.clock() - started) * 1000)),
            provider=provider,
        )

        if request.user_id and self.store is not None:
            translation_id = self._persist(request, result)
            if translation_id is not None:
                result = replace(result, translation_id=translation_id)

        return result

    def _resolve(self, request):
        """Return (text, provider name) from the first tier that answers."""
        for adapter in self.adapters:
            outcome = adapter.attempt(request)
            if outcome.ok:
                return outcome.text, outcome.provider
            if outcome.status == FAILED:
                logger.info(f"Provider {outcome.provider} failed ({outcome.reason}), trying next")

        text = self.dictionary.translate(
            request.source_language_code,
            request.target_language_code,
            request.source_text,
        )
        return text, DICTIONARY_PROVIDER

    def _persist(self, request, result):
        try:
            return self.store.save(request, result)
        except Exception as e:
            logger.error(f"Error saving translation for user {request.user_id}: {e}")
            return None


def build_translation_service(config, store=None):
    """Wire the default pipeline from application config."""
    return TranslationService(
        adapters=build_adapters(config),
        dictionary=DictionaryEngine(DictionaryTable.default()),
        store=store if store is not None else TranslationStore(),
    )
