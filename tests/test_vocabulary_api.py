"""
Tests for the vocabulary JSON API

Tests cover:
- Listing and searching
- Create / update / delete validation and status codes
- Bulk add and bulk topic assignment
- Mutation signals
- Error envelope for store failures and unknown endpoints
"""

from conftest import ANIMALS, read_records, write_records
from wordquiz_app.core.signals import vocabulary_created, vocabulary_deleted, vocabulary_updated

NEW_WORD = {'word': '鳥', 'meaning': 'con chim', 'phonetic': 'とり', 'topic': 'Animals'}


class TestListVocabulary:
    def test_empty_store(self, client):
        response = client.get('/api/vocabulary')
        assert response.status_code == 200
        assert response.get_json() == []

    def test_returns_all_records(self, client, seeded):
        assert client.get('/api/vocabulary').get_json() == ANIMALS

    def test_search_is_case_insensitive_across_fields(self, client, seeded):
        assert [r['id'] for r in client.get('/api/vocabulary?search=nature').get_json()] == [3, 4]
        assert [r['id'] for r in client.get('/api/vocabulary?search=MÈO').get_json()] == [1]
        assert [r['id'] for r in client.get('/api/vocabulary?search=いぬ').get_json()] == [2]


class TestCreateVocabulary:
    def test_create_assigns_next_id(self, client, seeded):
        response = client.post('/api/vocabulary', json=NEW_WORD)
        assert response.status_code == 201
        assert response.get_json() == dict(NEW_WORD, id=5)
        assert read_records(seeded)[-1]['id'] == 5

    def test_first_record_gets_id_one(self, client, store_file):
        response = client.post('/api/vocabulary', json=NEW_WORD)
        assert response.get_json()['id'] == 1
        assert read_records(store_file) == [dict(NEW_WORD, id=1)]

    def test_values_are_trimmed(self, client, store_file):
        response = client.post('/api/vocabulary', json={k: f'  {v} ' for k, v in NEW_WORD.items()})
        assert response.get_json()['word'] == '鳥'

    def test_duplicate_word_rejected(self, client, seeded):
        write_records(seeded, ANIMALS + [dict(NEW_WORD, id=5, word='Cat')])
        response = client.post('/api/vocabulary', json=dict(NEW_WORD, word='cat'))
        assert response.status_code == 400
        assert response.get_json()['message'] == 'Word already exists'
        assert len(read_records(seeded)) == 5

    def test_missing_fields_rejected(self, client, seeded):
        response = client.post('/api/vocabulary', json={'word': 'x', 'meaning': ' '})
        body = response.get_json()
        assert response.status_code == 400
        assert body['success'] is False
        assert body['code'] == 'VALIDATION_ERROR'
        assert set(body['details']['errors']) == {'meaning', 'phonetic', 'topic'}

    def test_non_json_body_rejected(self, client, seeded):
        response = client.post('/api/vocabulary', data='word=x')
        assert response.status_code == 400

    def test_create_sends_signal(self, app, client, seeded):
        received = []

        def receiver(sender, record=None, **kwargs):
            received.append(record)

        with vocabulary_created.connected_to(receiver, app):
            client.post('/api/vocabulary', json=NEW_WORD)
        assert [r['word'] for r in received] == ['鳥']


class TestUpdateVocabulary:
    def test_update_record(self, client, seeded):
        response = client.put('/api/vocabulary', json={'id': 1, 'word': '猫', 'meaning': 'mèo', 'phonetic': 'ねこ', 'topic': 'Pets'})
        assert response.status_code == 200
        assert read_records(seeded)[0] == {'id': 1, 'word': '猫', 'meaning': 'mèo', 'phonetic': 'ねこ', 'topic': 'Pets'}

    def test_numeric_string_id_accepted(self, client, seeded):
        response = client.put('/api/vocabulary', json=dict(ANIMALS[1], id='2', meaning='chó'))
        assert response.status_code == 200
        assert response.get_json()['id'] == 2

    def test_unknown_id_is_404(self, client, seeded):
        response = client.put('/api/vocabulary', json=dict(ANIMALS[0], id=99))
        assert response.status_code == 404
        assert read_records(seeded) == ANIMALS

    def test_invalid_id_is_400(self, client, seeded):
        response = client.put('/api/vocabulary', json=dict(ANIMALS[0], id='abc'))
        assert response.status_code == 400

    def test_word_taken_by_other_record(self, client, seeded):
        response = client.put('/api/vocabulary', json=dict(ANIMALS[0], word='犬'))
        assert response.status_code == 400
        assert response.get_json()['message'] == 'Word already exists'

    def test_keeping_own_word_is_allowed(self, client, seeded):
        response = client.put('/api/vocabulary', json=dict(ANIMALS[0], meaning='mèo'))
        assert response.status_code == 200

    def test_update_sends_previous_record(self, app, client, seeded):
        received = []

        def receiver(sender, record=None, previous=None, **kwargs):
            received.append((previous['meaning'], record['meaning']))

        with vocabulary_updated.connected_to(receiver, app):
            client.put('/api/vocabulary', json=dict(ANIMALS[0], meaning='mèo'))
        assert received == [('con mèo', 'mèo')]


class TestDeleteVocabulary:
    def test_delete_record(self, client, seeded):
        response = client.delete('/api/vocabulary?id=2')
        assert response.status_code == 200
        assert response.get_json() == {'message': 'Vocabulary deleted successfully'}
        assert [r['id'] for r in read_records(seeded)] == [1, 3, 4]

    def test_delete_missing_id_is_404_and_leaves_store(self, client, seeded):
        before = seeded.read_text(encoding='utf-8')
        response = client.delete('/api/vocabulary?id=99')
        assert response.status_code == 404
        assert response.get_json()['code'] == 'NOT_FOUND'
        assert seeded.read_text(encoding='utf-8') == before

    def test_delete_without_id_is_400(self, client, seeded):
        assert client.delete('/api/vocabulary').status_code == 400
        assert client.delete('/api/vocabulary?id=x').status_code == 400

    def test_delete_sends_signal(self, app, client, seeded):
        received = []
        with vocabulary_deleted.connected_to(lambda sender, record=None, **kw: received.append(record['id']), app):
            client.delete('/api/vocabulary?id=3')
        assert received == [3]


class TestBulkVocabulary:
    def test_bulk_add_lines(self, client, seeded):
        response = client.post('/api/vocabulary/bulk', json={
            'topic': 'Food',
            'text': 'りんご:quả táo\nご飯:cơm:ごはん\n\n猫:mèo',
        })
        body = response.get_json()
        assert response.status_code == 201
        assert [r['word'] for r in body['added']] == ['りんご', 'ご飯']
        assert body['skipped'] == ['猫']
        assert body['added'][0]['phonetic'] == 'りんご'
        assert body['added'][1] == {'id': 6, 'word': 'ご飯', 'meaning': 'cơm', 'phonetic': 'ごはん', 'topic': 'Food'}
        assert len(read_records(seeded)) == 6

    def test_malformed_line_rejects_batch(self, client, seeded):
        response = client.post('/api/vocabulary/bulk', json={'topic': 'Food', 'text': 'りんご:quả táo\nbroken'})
        assert response.status_code == 400
        assert response.get_json()['details']['errors'] == {
            '2': 'Invalid format: broken. Expected "word:meaning" or "word:meaning:phonetic"'
        }
        assert read_records(seeded) == ANIMALS

    def test_topic_required(self, client, seeded):
        response = client.post('/api/vocabulary/bulk', json={'text': 'りんご:quả táo'})
        assert response.status_code == 400

    def test_assign_existing_records_to_topic(self, client, seeded):
        response = client.post('/api/vocabulary/bulk', json={'topic': 'Favourites', 'ids': [1, '3']})
        assert response.status_code == 200
        assert [r['id'] for r in response.get_json()['updated']] == [1, 3]
        topics = {r['id']: r['topic'] for r in read_records(seeded)}
        assert topics == {1: 'Favourites', 2: 'Animals', 3: 'Favourites', 4: 'Nature'}

    def test_assign_ids_must_be_a_list(self, client, seeded):
        response = client.post('/api/vocabulary/bulk', json={'topic': 'Favourites', 'ids': 5})
        assert response.status_code == 400
        assert response.get_json()['code'] == 'VALIDATION_ERROR'
        assert read_records(seeded) == ANIMALS

    def test_text_must_be_a_string(self, client, seeded):
        response = client.post('/api/vocabulary/bulk', json={'topic': 'Food', 'text': 123})
        assert response.status_code == 400
        assert response.get_json()['code'] == 'VALIDATION_ERROR'
        assert read_records(seeded) == ANIMALS

    def test_assign_unknown_id_is_404(self, client, seeded):
        response = client.post('/api/vocabulary/bulk', json={'topic': 'Favourites', 'ids': [1, 42]})
        assert response.status_code == 404
        assert read_records(seeded) == ANIMALS


class TestErrorResponses:
    def test_corrupt_store_is_generic_500(self, client, seeded):
        seeded.write_text('{broken', encoding='utf-8')
        response = client.get('/api/vocabulary')
        assert response.status_code == 500
        body = response.get_json()
        assert body['code'] == 'SERVER_ERROR'
        assert str(seeded) not in response.get_data(as_text=True)

    def test_lenient_store_treats_corrupt_file_as_empty(self, make_app, seeded):
        seeded.write_text('{broken', encoding='utf-8')
        app = make_app(VOCABULARY_STRICT_LOAD=False)
        response = app.test_client().get('/api/vocabulary')
        assert response.status_code == 200
        assert response.get_json() == []

    def test_unknown_api_endpoint_is_json_404(self, client):
        response = client.get('/api/nothing-here')
        assert response.status_code == 404
        assert response.get_json()['code'] == 'NOT_FOUND'

    def test_wrong_method_is_json_405(self, client):
        response = client.patch('/api/vocabulary')
        assert response.status_code == 405
        assert response.get_json()['code'] == 'METHOD_NOT_ALLOWED'

    def test_api_is_csrf_exempt(self, make_app, store_file):
        app = make_app(WTF_CSRF_ENABLED=True)
        response = app.test_client().post('/api/vocabulary', json=NEW_WORD)
        assert response.status_code == 201
