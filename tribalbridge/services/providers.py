"""External translation provider adapters.

Each adapter wraps one backend (local Ollama model, OpenAI, Google Cloud
Translation) behind the same ``attempt(request) -> AdapterResult`` call.
Adapters never raise: missing configuration is reported as ``unavailable``
and any HTTP/parse problem as ``failed``. There are no retries here; a failed
adapter is final for that request.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import requests

from tribalbridge.constants.languages import get_language_display_name

logger = logging.getLogger(__name__)

SUCCESS = 'success'
UNAVAILABLE = 'unavailable'
FAILED = 'failed'

# Providers that fail silently tend to echo the input back
ECHO_MIN_LENGTH = 4

SYSTEM_PROMPT = (
    'You are a professional translator specializing in indigenous and tribal languages. '
    'Translate accurately while preserving cultural context and traditional meanings.'
)


@dataclass(frozen=True)
class AdapterResult:
    """Outcome of one adapter attempt."""
    status: str
    text: Optional[str] = None
    provider: Optional[str] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == SUCCESS

    @classmethod
    def success(cls, provider, text):
        return cls(SUCCESS, text=text, provider=provider)

    @classmethod
    def unavailable(cls, provider):
        return cls(UNAVAILABLE, provider=provider, reason='not configured')

    @classmethod
    def failed(cls, provider, reason):
        return cls(FAILED, provider=provider, reason=reason)


class ProviderAdapter:
    """Base adapter: subclasses implement ``is_configured`` and ``_request``."""

    name = 'provider'

    def __init__(self, timeout=10):
        self.timeout = timeout

    @property
    def is_configured(self) -> bool:
        raise NotImplementedError

    def _request(self, request) -> Optional[str]:
        """Issue the HTTP call and return the raw translated text (or None)."""
        raise NotImplementedError

    def attempt(self, request) -> AdapterResult:
        if not self.is_configured:
            return AdapterResult.unavailable(self.name)

        try:
            text = self._request(request)
        except requests.Timeout:
            logger.warning(f"{self.name} translation timeout")
            return AdapterResult.failed(self.name, 'timeout')
        except requests.RequestException as e:
            logger.warning(f"{self.name} translation request failed: {e}")
            return AdapterResult.failed(self.name, 'request error')
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            logger.warning(f"{self.name} returned an unexpected response: {e}")
            return AdapterResult.failed(self.name, 'malformed response')

        text = text.strip() if isinstance(text, str) else ''
        if not text:
            logger.warning(f"{self.name} returned an empty translation")
            return AdapterResult.failed(self.name, 'empty response')

        source_text = request.source_text.strip()
        if text == source_text and len(source_text) >= ECHO_MIN_LENGTH:
            logger.warning(f"{self.name} echoed the source text back, ignoring it")
            return AdapterResult.failed(self.name, 'echoed input')

        logger.info(f"{self.name} translation successful")
        return AdapterResult.success(self.name, text)


class OllamaAdapter(ProviderAdapter):
    """Local model served by Ollama (``/api/generate``)."""

    name = 'ollama'

    def __init__(self, enabled=False, base_url='http://localhost:11434', model='mistral', timeout=10):
        super().__init__(timeout)
        self.enabled = enabled
        self.base_url = (base_url or '').rstrip('/')
        self.model = model

    @property
    def is_configured(self):
        return bool(self.enabled and self.base_url)

    def build_prompt(self, request):
        source = get_language_display_name(request.source_language_code)
        target = get_language_display_name(request.target_language_code)
        return (
            f"{SYSTEM_PROMPT} Translate the following text from {source} to {target}. "
            "Provide ONLY the translation, no explanations or additional text.\n\n"
            f'Source text: "{request.source_text}"\n\n'
            "Translation:"
        )

    def _request(self, request):
        response = requests.post(
            f"{self.base_url}/api/generate",
            json={
                'model': self.model,
                'prompt': self.build_prompt(request),
                'stream': False,
                'options': {
                    'temperature': 0.3,
                    'top_p': 0.9,
                    'num_predict': 200,
                },
            },
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json().get('response')


class OpenAIAdapter(ProviderAdapter):
    """OpenAI chat completions."""

    name = 'openai'
    url = 'https://api.openai.com/v1/chat/completions'

    def __init__(self, api_key='', model='gpt-3.5-turbo', timeout=10):
        super().__init__(timeout)
        self.api_key = api_key or ''
        self.model = model

    @property
    def is_configured(self):
        return bool(self.api_key.strip())

    def _request(self, request):
        response = requests.post(
            self.url,
            headers={'Authorization': f'Bearer {self.api_key}'},
            json={
                'model': self.model,
                'messages': [
                    {
                        'role': 'system',
                        'content': (
                            f"{SYSTEM_PROMPT} Source language: {request.source_language_code}, "
                            f"Target language: {request.target_language_code}"
                        ),
                    },
                    {
                        'role': 'user',
                        'content': (
                            f'Translate this text: "{request.source_text}". '
                            "Provide ONLY the translation, no explanations."
                        ),
                    },
                ],
                'temperature': 0.3,
                'max_tokens': 500,
            },
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()['choices'][0]['message']['content']


class GoogleTranslateAdapter(ProviderAdapter):
    """Google Cloud Translation API v2."""

    name = 'google'
    url = 'https://translation.googleapis.com/language/translate/v2'

    def __init__(self, api_key='', timeout=10):
        super().__init__(timeout)
        self.api_key = api_key or ''

    @property
    def is_configured(self):
        return bool(self.api_key.strip())

    def _request(self, request):
        response = requests.post(
            self.url,
            params={'key': self.api_key},
            json={
                'q': request.source_text,
                'source': request.source_language_code,
                'target': request.target_language_code,
                'format': 'text',
            },
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.json()['data']['translations'][0]['translatedText']


def build_adapters(config):
    """Adapters in trust order: local model, then OpenAI, then Google."""
    timeout = config.get('TRANSLATION_PROVIDER_TIMEOUT', 10)
    return (
        OllamaAdapter(
            enabled=config.get('OLLAMA_ENABLED', False),
            base_url=config.get('OLLAMA_URL', 'http://localhost:11434'),
            model=config.get('OLLAMA_MODEL', 'mistral'),
            timeout=timeout,
        ),
        OpenAIAdapter(
            api_key=config.get('OPENAI_API_KEY', ''),
            model=config.get('OPENAI_MODEL', 'gpt-3.5-turbo'),
            timeout=timeout,
        ),
        GoogleTranslateAdapter(
            api_key=config.get('GOOGLE_TRANSLATE_API_KEY', ''),
            timeout=timeout,
        ),
    )
