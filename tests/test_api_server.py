"""Tests for API server endpoints"""
from unittest.mock import patch

import pytest
from api_server import app

RECIPE = "Tomato Soup\nIngredients:\n2 cups tomato\n1 tsp salt\nInstructions:\n1. Simmer tomatoes\n2. Add salt"


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def test_health(client):
    """Health check returns ok"""
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok'}


class TestParseEndpoint:
    """Tests for POST /parse"""

    def test_parses_json_body(self, client):
        """Returns the draft and its review warnings"""
        response = client.post('/parse', json={'text': RECIPE})
        assert response.status_code == 200

        data = response.get_json()
        assert data['recipe']['title'] == 'Tomato Soup'
        assert len(data['recipe']['ingredients']) == 2
        assert [i['step'] for i in data['recipe']['instructions']] == [1, 2]
        assert isinstance(data['warnings'], list)

    def test_parses_form_field(self, client):
        """Form posts work too"""
        response = client.post('/parse', data={'text': RECIPE})
        assert response.status_code == 200
        assert response.get_json()['recipe']['title'] == 'Tomato Soup'

    def test_missing_text(self, client):
        """No text field -> 400"""
        response = client.post('/parse', json={})
        assert response.status_code == 400
        assert b'No recipe text provided' in response.data

    def test_blank_text(self, client):
        """Whitespace-only text -> 400"""
        response = client.post('/parse', json={'text': '   \n  '})
        assert response.status_code == 400

    def test_non_string_text(self, client):
        """Text must be a string"""
        response = client.post('/parse', json={'text': 42})
        assert response.status_code == 400

    def test_text_too_long(self, client):
        """Oversized text -> 413"""
        with patch('api_server.MAX_TEXT_LENGTH', 10):
            response = client.post('/parse', json={'text': RECIPE})
        assert response.status_code == 413
        assert b'too long' in response.data


class TestParseBatchEndpoint:
    """Tests for POST /parse-batch"""

    def test_parses_multiple_recipes(self, client):
        """Each --RECIPE BREAK-- block becomes a recipe"""
        text = RECIPE + "\n--RECIPE BREAK--\nGarlic Bread\n• 1/2 lb Italian sausage"
        response = client.post('/parse-batch', json={'text': text})
        assert response.status_code == 200

        data = response.get_json()
        assert data['count'] == 2
        assert [r['title'] for r in data['recipes']] == ['Tomato Soup', 'Garlic Bread']

    def test_missing_text(self, client):
        """No text -> 400"""
        response = client.post('/parse-batch', json={})
        assert response.status_code == 400
