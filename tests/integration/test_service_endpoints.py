"""Tests for the password service FastAPI endpoints."""

import pytest
from fastapi.testclient import TestClient
from service.api import app as app_module
from service.api.app import app, set_dictionary, get_dictionary, get_index
from shared.config.config import config


@pytest.fixture
def client(sample_dictionary):
    """Create test client with the sample dictionary installed."""
    set_dictionary(sample_dictionary)
    yield TestClient(app)
    set_dictionary(None)


class TestHealthEndpoint:
    """Tests for /health endpoint."""
    
    def test_health(self, client):
        """Test that /health reports ok."""
        response = client.get("/health")
        
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestGenerateEndpoint:
    """Tests for /generate endpoint."""
    
    def test_generate_with_defaults(self, client):
        """Test that an empty body uses the configured defaults."""
        response = client.post("/generate", json={})
        
        assert response.status_code == 200
        passwords = response.json()["passwords"]
        assert len(passwords) == 1
        password = passwords[0]
        assert password[:2] == password[0] * 2
        assert password[-2:] == password[-1] * 2
        
        inside = password[4]
        words = password[5:-5].split(inside)
        assert len(words) == config.WORD_COUNT
    
    def test_generate_multiple(self, client):
        """Test that count controls how many passwords are returned."""
        response = client.post(
            "/generate",
            json={"min_word_length": 3, "max_word_length": 8, "word_count": 2, "count": 5},
        )
        
        assert response.status_code == 200
        assert len(response.json()["passwords"]) == 5
    
    def test_generate_respects_bounds(self, client, sample_dictionary):
        """Test that words come from the requested length range."""
        response = client.post(
            "/generate",
            json={"min_word_length": 5, "max_word_length": 5, "word_count": 4, "count": 10},
        )
        
        known = {entry.word for entry in sample_dictionary if entry.length == 5}
        for password in response.json()["passwords"]:
            inside = password[4]
            words = password[5:-5].split(inside)
            assert len(words) == 4
            assert all(word.lower() in known for word in words)
    
    def test_no_eligible_words_returns_400(self, client):
        """Test that an empty length range is a 400 with NoEligibleWords."""
        response = client.post(
            "/generate",
            json={"min_word_length": 10, "max_word_length": 12},
        )
        
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "NoEligibleWords"
        assert "[10, 12]" in data["detail"]
    
    def test_invalid_bounds_returns_400(self, client):
        """Test that min > max is a 400 with InvalidBounds."""
        response = client.post(
            "/generate",
            json={"min_word_length": 8, "max_word_length": 4},
        )
        
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidBounds"
    
    @pytest.mark.parametrize("body", [
        {"word_count": 0},
        {"word_count": 25},
        {"min_word_length": 0},
        {"max_word_length": 20},
        {"min_word_length": 15, "max_word_length": 15},
        {"count": 0},
        {"min_word_length": "four"},
    ])
    def test_invalid_payload_returns_422(self, client, body):
        """Test that payload validation errors are reported by FastAPI."""
        response = client.post("/generate", json=body)
        assert response.status_code == 422
    
    def test_empty_dictionary_returns_400(self, client):
        """Test that an empty dictionary is a 400 with InvalidDictionary."""
        set_dictionary(())
        
        response = client.post("/generate", json={})
        
        assert response.status_code == 400
        assert response.json()["error"] == "InvalidDictionary"
    
    def test_unexpected_error_returns_500(self, client, monkeypatch):
        """Test that unexpected exceptions become a 500 error body."""
        def broken_dictionary():
            raise RuntimeError("disk on fire")
        
        monkeypatch.setattr(app_module, "get_dictionary", broken_dictionary)
        
        response = client.post("/generate", json={})
        
        assert response.status_code == 500
        assert response.json() == {"error": "InternalError", "detail": "disk on fire"}


class TestDictionaryLoading:
    """Tests for lazy dictionary loading from config."""
    
    def test_loads_configured_file_once(self, tmp_path, monkeypatch):
        """Test that the dictionary file is read on first use and then cached."""
        path = tmp_path / "words.csv"
        path.write_text("Word,StringLength\nlion,4\nbear,4\n", encoding="utf-8")
        monkeypatch.setattr(config, "DICTIONARY_FILE", str(path))
        set_dictionary(None)
        
        try:
            first = get_dictionary()
            path.unlink()
            second = get_dictionary()
        finally:
            set_dictionary(None)
        
        assert first is second
        assert [entry.word for entry in first] == ["lion", "bear"]
    
    def test_missing_file_returns_400(self, tmp_path, monkeypatch):
        """Test that a missing dictionary file surfaces as InvalidDictionary."""
        monkeypatch.setattr(config, "DICTIONARY_FILE", str(tmp_path / "missing.csv"))
        set_dictionary(None)
        
        response = TestClient(app).post("/generate", json={})
        
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "InvalidDictionary"
        assert "not found" in data["detail"]


class TestIndexConfiguration:
    """Tests for the configured word index."""
    
    def test_unknown_index_returns_500(self, client, monkeypatch):
        """Test that an unknown WORD_INDEX is reported per request, not at import."""
        monkeypatch.setattr(config, "WORD_INDEX", "btree")
        monkeypatch.setattr(app_module, "_index", None)
        
        response = client.post("/generate", json={})
        
        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "InternalError"
        assert "Unknown word index: btree" in data["detail"]
    
    def test_index_created_once(self, client, monkeypatch):
        """Test that the index is built on first use and then reused."""
        monkeypatch.setattr(app_module, "_index", None)
        
        first = get_index()
        assert client.post("/generate", json={}).status_code == 200
        
        assert get_index() is first
