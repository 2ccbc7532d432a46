"""
Tests for the translate and translation history endpoints.
"""

from unittest.mock import patch

import pytest
from faker import Faker

from tribalbridge.models import TranslationFeedback

from conftest import make_token

fake = Faker()


def _translate(client, headers=None, **overrides):
    data = {
        'source_language_code': 'en',
        'target_language_code': 'gon',
        'source_text': 'Hello, how are you?',
    }
    data.update(overrides)
    return client.post('/api/translate', json=data, headers=headers or {})


class TestHealth:

    def test_root_health(self, client):
        resp = client.get('/health')
        assert resp.status_code == 200
        assert resp.get_json()['status'] == 'ok'


class TestTranslate:
    """Tests for POST /api/translate"""

    def test_anonymous_translation(self, client, db_session):
        response = _translate(client)

        assert response.status_code == 200
        data = response.json
        assert data['translated_text'] == 'नमस्कार, कैसे हो तुम?'
        assert data['confidence'] == 0.75
        assert data['accuracy'] == 0.80
        assert data['efficiency'] == 1.5
        assert data['provider'] == 'dictionary'
        assert data['translation_id'] is None
        assert data['processing_time_ms'] >= 0

    def test_signed_in_translation_is_saved(self, client, db_session, auth_headers):
        response = _translate(client, auth_headers, translation_type='audio')

        assert response.status_code == 200
        translation_id = response.json['translation_id']
        assert translation_id is not None

        history = client.get('/api/translations', headers=auth_headers).json
        assert history['total'] == 1
        assert history['translations'][0]['id'] == translation_id
        assert history['translations'][0]['translation_type'] == 'audio'

    def test_invalid_token_translates_anonymously(self, client, db_session):
        headers = {'Authorization': 'Bearer invalid-token-here'}

        response = _translate(client, headers)

        assert response.status_code == 200
        assert response.json['translation_id'] is None

    def test_placeholder_for_unknown_language(self, client, db_session):
        response = _translate(client, target_language_code='xx', source_text='Unmapped phrase')

        assert response.status_code == 200
        text = response.json['translated_text']
        assert 'XX' in text and 'Unmapped phrase' in text and 'English' in text

    @pytest.mark.parametrize('text', ['', '    '])
    def test_empty_text_rejected(self, client, db_session, text):
        response = _translate(client, source_text=text)

        assert response.status_code == 400
        assert 'error' in response.json

    def test_missing_fields(self, client, db_session):
        response = client.post('/api/translate', json={'source_text': 'hello'})

        assert response.status_code == 400

    def test_non_json_body(self, client, db_session):
        response = client.post('/api/translate', data='hello', content_type='text/plain')

        assert response.status_code == 400

    def test_json_list_body_rejected(self, client, db_session):
        response = client.post('/api/translate', json=['hello'])

        assert response.status_code == 400
        assert 'error' in response.json

    def test_text_length_limit(self, client, db_session):
        assert _translate(client, source_text='a' * 5000).status_code == 200

        response = _translate(client, source_text='a' * 5001)

        assert response.status_code == 400
        assert 'at most 5000' in response.json['error']

    def test_unexpected_error_returns_json_500(self, app, client, db_session):
        service = app.extensions['translation_service']

        with patch.object(service, 'translate', side_effect=RuntimeError('backend exploded')):
            response = _translate(client)

        assert response.status_code == 500
        assert response.json == {'error': 'backend exploded'}

    def test_same_languages_rejected(self, client, db_session):
        response = _translate(client, target_language_code='en')

        assert response.status_code == 400

    def test_invalid_translation_type(self, client, db_session):
        response = _translate(client, translation_type='video')

        assert response.status_code == 400

    def test_dictionary_pairs(self, client):
        response = client.get('/api/translate/pairs')

        assert response.status_code == 200
        assert {'source': 'en', 'target': 'gon'} in response.json['pairs']


class TestHistory:
    """Tests for GET /api/translations"""

    def test_requires_token(self, client, db_session):
        response = client.get('/api/translations')

        assert response.status_code == 401

    def test_expired_token(self, client, db_session, test_user_id):
        from datetime import timedelta
        token = make_token(test_user_id, expires_in=timedelta(seconds=-1))

        response = client.get('/api/translations', headers={'Authorization': f'Bearer {token}'})

        assert response.status_code == 401
        assert response.json['error'] == 'Token has expired'

    def test_history_is_scoped(self, client, db_session, auth_headers, second_auth_headers):
        _translate(client, auth_headers)
        _translate(client, second_auth_headers, source_text='water')

        mine = client.get('/api/translations', headers=auth_headers).json
        theirs = client.get('/api/translations', headers=second_auth_headers).json

        assert mine['total'] == 1
        assert theirs['total'] == 1
        assert mine['translations'][0]['source_text'] == 'Hello, how are you?'

    def test_get_single_translation(self, client, db_session, auth_headers, second_auth_headers):
        translation_id = _translate(client, auth_headers).json['translation_id']

        assert client.get(f'/api/translations/{translation_id}', headers=auth_headers).status_code == 200
        assert client.get(f'/api/translations/{translation_id}', headers=second_auth_headers).status_code == 404


class TestDeleteAndFavorite:

    def test_delete_own_translation(self, client, db_session, auth_headers):
        translation_id = _translate(client, auth_headers).json['translation_id']

        response = client.delete(f'/api/translations/{translation_id}', headers=auth_headers)

        assert response.status_code == 200
        assert client.get('/api/translations', headers=auth_headers).json['total'] == 0

    def test_cannot_delete_other_users_translation(self, client, db_session, auth_headers, second_auth_headers):
        translation_id = _translate(client, auth_headers).json['translation_id']

        response = client.delete(f'/api/translations/{translation_id}', headers=second_auth_headers)

        assert response.status_code == 404
        assert client.get('/api/translations', headers=auth_headers).json['total'] == 1

    def test_toggle_favorite(self, client, db_session, auth_headers):
        translation_id = _translate(client, auth_headers).json['translation_id']

        first = client.post(f'/api/translations/{translation_id}/favorite', headers=auth_headers)
        second = client.post(f'/api/translations/{translation_id}/favorite', headers=auth_headers)

        assert first.status_code == 200 and first.json['is_favorite'] is True
        assert second.status_code == 200 and second.json['is_favorite'] is False

    def test_favorites_filter(self, client, db_session, auth_headers):
        favorite_id = _translate(client, auth_headers).json['translation_id']
        _translate(client, auth_headers, source_text='water')
        client.post(f'/api/translations/{favorite_id}/favorite', headers=auth_headers)

        favorites = client.get('/api/translations?favorites=true', headers=auth_headers).json

        assert favorites['total'] == 1
        assert favorites['translations'][0]['id'] == favorite_id

    def test_delete_unexpected_error_returns_json_500(self, client, db_session, auth_headers):
        translation_id = _translate(client, auth_headers).json['translation_id']

        with patch('tribalbridge.routes.translations.store.delete', side_effect=RuntimeError('disk full')):
            response = client.delete(f'/api/translations/{translation_id}', headers=auth_headers)

        assert response.status_code == 500
        assert response.json == {'error': 'disk full'}

    def test_cannot_favorite_other_users_translation(self, client, db_session, auth_headers, second_auth_headers):
        translation_id = _translate(client, auth_headers).json['translation_id']

        response = client.post(f'/api/translations/{translation_id}/favorite', headers=second_auth_headers)

        assert response.status_code == 404
        record = client.get(f'/api/translations/{translation_id}', headers=auth_headers).json
        assert record['is_favorite'] is False


class TestFeedback:
    """Tests for POST /api/translations/:id/feedback"""

    def test_feedback_on_own_translation(self, client, db_session, auth_headers):
        translation_id = _translate(client, auth_headers).json['translation_id']

        response = client.post(
            f'/api/translations/{translation_id}/feedback',
            headers=auth_headers,
            json={'feedback_type': 'accuracy', 'rating': 4, 'comment': fake.sentence()}
        )

        assert response.status_code == 201
        assert TranslationFeedback.query.filter_by(translation_id=translation_id).count() == 1

    def test_feedback_on_other_users_translation(self, client, db_session, auth_headers, second_auth_headers):
        translation_id = _translate(client, auth_headers).json['translation_id']

        response = client.post(
            f'/api/translations/{translation_id}/feedback',
            headers=second_auth_headers,
            json={'feedback_type': 'accuracy', 'rating': 4}
        )

        assert response.status_code == 404

    @pytest.mark.parametrize('payload', [
        {'feedback_type': 'accuracy', 'rating': 6},
        {'feedback_type': 'spelling', 'rating': 3},
        {'feedback_type': 'accuracy', 'rating': '5'},
        {'rating': 3},
        ['feedback_type', 'rating'],
    ])
    def test_invalid_feedback(self, client, db_session, auth_headers, payload):
        translation_id = _translate(client, auth_headers).json['translation_id']

        response = client.post(f'/api/translations/{translation_id}/feedback', headers=auth_headers, json=payload)

        assert response.status_code == 400

    def test_deleting_translation_removes_feedback(self, client, db_session, auth_headers):
        translation_id = _translate(client, auth_headers).json['translation_id']
        client.post(
            f'/api/translations/{translation_id}/feedback',
            headers=auth_headers,
            json={'feedback_type': 'technical_issue', 'rating': 2}
        )

        client.delete(f'/api/translations/{translation_id}', headers=auth_headers)

        assert TranslationFeedback.query.count() == 0
