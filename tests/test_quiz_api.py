"""
Tests for the quiz JSON API

Tests cover:
- One-off question generation and availability errors
- Typed answer checking
- The session-backed quiz flow and its illegal transitions
"""

from conftest import ANIMALS, write_records
from wordquiz_app.core.signals import answer_checked, quiz_finished
from wordquiz_app.modules.quiz.services.quiz_session_manager import MAX_REVIEW_RESULTS


class TestGenerateQuestion:
    def test_four_record_store_gives_four_options(self, client, seeded):
        response = client.get('/api/quiz?mode=phonetic-to-meaning')
        assert response.status_code == 200
        question = response.get_json()
        record = next(r for r in ANIMALS if r['id'] == question['id'])

        assert len(question['options']) == 4
        assert question['correctAnswer'] in question['options']
        assert question['correctAnswer'] == record['meaning']
        assert question['question'] == record['phonetic']
        assert question['inputType'] == 'multiple-choice'

    def test_text_mode_has_no_options(self, client, seeded):
        question = client.get('/api/quiz?mode=meaning-to-phonetic-text').get_json()
        assert 'options' not in question
        assert question['inputType'] == 'text-input'

    def test_topic_filter(self, client, seeded):
        for _ in range(5):
            question = client.get('/api/quiz?topic=Nature').get_json()
            assert question['id'] in (3, 4)

    def test_too_few_records(self, client, seeded):
        write_records(seeded, ANIMALS[:3])
        for url in ('/api/quiz', '/api/quiz?topic=Animals'):
            response = client.get(url)
            assert response.status_code == 400
            assert response.get_json()['code'] == 'QUIZ_UNAVAILABLE'

    def test_empty_store(self, client):
        response = client.get('/api/quiz')
        assert response.status_code == 400
        assert response.get_json()['message'] == 'No vocabulary available for quiz'

    def test_unknown_topic(self, client, seeded):
        response = client.get('/api/quiz?topic=Plants')
        assert response.status_code == 400
        assert response.get_json()['details'] == {'topic': 'Plants'}


class TestCheckAnswer:
    def test_loose_match_for_text_types(self, client):
        response = client.post('/api/quiz', json={
            'userAnswer': 'con mèo',
            'correctAnswer': 'mèo',
            'questionType': 'phonetic-to-meaning-text',
        })
        assert response.status_code == 200
        assert response.get_json() == {
            'isCorrect': True,
            'userAnswer': 'con mèo',
            'correctAnswer': 'mèo',
            'isVietnamese': True,
        }

    def test_wrong_answer(self, client):
        body = client.post('/api/quiz', json={
            'userAnswer': 'dog',
            'correctAnswer': 'cat',
            'questionType': 'phonetic-to-meaning',
        }).get_json()
        assert body['isCorrect'] is False
        assert body['isVietnamese'] is False

    def test_missing_fields(self, client):
        response = client.post('/api/quiz', json={'userAnswer': 'mèo'})
        assert response.status_code == 400
        assert response.get_json()['message'] == 'Missing required fields'

    def test_sends_answer_checked(self, app, client):
        received = []
        with answer_checked.connected_to(lambda sender, **kw: received.append(kw), app):
            client.post('/api/quiz', json={'userAnswer': 'a', 'correctAnswer': 'a', 'questionType': 'mixed-text'})
        assert received == [{'question_type': 'mixed-text', 'is_correct': True}]


class TestQuizSession:
    def test_initial_state(self, client):
        state = client.get('/api/quiz/session').get_json()
        assert state['state'] == 'mode_select'
        assert state['summary'] == {'correct': 0, 'total': 0, 'percentage': 0, 'results': []}

    def test_full_run(self, client, seeded):
        state = client.post('/api/quiz/session/start', json={'mode': 'phonetic-to-meaning'}).get_json()
        assert state['state'] == 'question'
        assert state['totalQuestions'] == 1

        correct = state['question']['correctAnswer']
        state = client.post('/api/quiz/session/answer', json={'answer': correct}).get_json()
        assert state['state'] == 'feedback'
        assert state['result']['isCorrect'] is True
        assert state['selectedAnswer'] == correct

        state = client.post('/api/quiz/session/next').get_json()
        assert state['state'] == 'question'
        assert state['totalQuestions'] == 2

        wrong = next(o for o in state['question']['options'] if o != state['question']['correctAnswer'])
        state = client.post('/api/quiz/session/answer', json={'answer': wrong}).get_json()
        assert state['result']['isCorrect'] is False

        state = client.post('/api/quiz/session/finish').get_json()
        assert state['state'] == 'finished'
        assert state['summary']['correct'] == 1
        assert state['summary']['total'] == 2
        assert state['summary']['percentage'] == 50

        state = client.post('/api/quiz/session/reset').get_json()
        assert state['state'] == 'mode_select'
        assert client.get('/api/quiz/session').get_json()['state'] == 'mode_select'

    def test_text_mode_uses_loose_check(self, client, seeded):
        state = client.post('/api/quiz/session/start', json={'mode': 'phonetic-to-meaning-text'}).get_json()
        answer = state['question']['correctAnswer'].upper()
        state = client.post('/api/quiz/session/answer', json={'answer': answer}).get_json()
        assert state['result']['isCorrect'] is True

    def test_finish_without_answers(self, client, seeded):
        client.post('/api/quiz/session/start', json={'mode': 'mixed'})
        summary = client.post('/api/quiz/session/finish').get_json()['summary']
        assert summary == {'correct': 0, 'total': 0, 'percentage': 0, 'results': []}

    def test_illegal_transitions(self, client, seeded):
        assert client.post('/api/quiz/session/next').status_code == 400
        assert client.post('/api/quiz/session/answer', json={'answer': 'x'}).status_code == 400
        assert client.post('/api/quiz/session/finish').status_code == 400

        client.post('/api/quiz/session/start', json={'mode': 'mixed'})
        assert client.post('/api/quiz/session/start', json={'mode': 'mixed'}).status_code == 400
        assert client.post('/api/quiz/session/next').status_code == 400

    def test_blank_answer_rejected(self, client, seeded):
        client.post('/api/quiz/session/start', json={'mode': 'mixed-text'})
        response = client.post('/api/quiz/session/answer', json={'answer': '   '})
        assert response.status_code == 400
        assert client.get('/api/quiz/session').get_json()['state'] == 'question'

    def test_start_without_enough_vocabulary(self, client, seeded):
        write_records(seeded, ANIMALS[:2])
        response = client.post('/api/quiz/session/start', json={'mode': 'mixed'})
        assert response.status_code == 400
        assert client.get('/api/quiz/session').get_json()['state'] == 'mode_select'

    def test_unknown_mode_becomes_mixed(self, client, seeded):
        state = client.post('/api/quiz/session/start', json={'mode': 'bogus'}).get_json()
        assert state['mode'] == 'mixed'

    def test_review_results_are_capped(self, client, seeded):
        client.post('/api/quiz/session/start', json={'mode': 'meaning-to-phonetic'})
        rounds = MAX_REVIEW_RESULTS + 2
        for number in range(rounds):
            state = client.get('/api/quiz/session').get_json()
            client.post('/api/quiz/session/answer', json={'answer': state['question']['correctAnswer']})
            if number < rounds - 1:
                client.post('/api/quiz/session/next')

        state = client.get('/api/quiz/session').get_json()
        assert state['answered'] == rounds
        assert state['correct'] == rounds
        assert len(state['results']) == MAX_REVIEW_RESULTS

    def test_finish_sends_signal(self, app, client, seeded):
        received = []
        client.post('/api/quiz/session/start', json={'mode': 'phonetic-to-meaning'})
        with quiz_finished.connected_to(lambda sender, **kw: received.append(kw), app):
            client.post('/api/quiz/session/finish')
        assert received == [{'mode': 'phonetic-to-meaning', 'correct': 0, 'total': 0, 'percentage': 0}]
