"""Tests for the HTTP surface."""

import json
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from prompt_gallery.domain.views.renderer import LOAD_ERROR_MESSAGE, SCRIPT_URL
from prompt_gallery.infrastructure.clipboard import ClipboardHelper
from prompt_gallery.main import app
from prompt_gallery.settings import settings

EVENTS_URL = f"{settings.api_v1_prefix}/ui/events"


@pytest.fixture
def client(prompts_file):
    """Test client with the sample catalog loaded."""
    with patch.object(settings, "prompts_source", str(prompts_file)):
        with TestClient(app) as test_client:
            yield test_client


@pytest.fixture
def failed_client(tmp_path):
    """Test client whose catalog failed to load."""
    bad_file = tmp_path / "prompts.json"
    bad_file.write_text(json.dumps({"nope": True}), encoding="utf-8")
    with patch.object(settings, "prompts_source", str(bad_file)):
        with TestClient(app) as test_client:
            yield test_client


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "catalog_loaded": True}


def test_request_id_header(client):
    response = client.get("/health", headers={"X-Request-Id": "abc123"})
    assert response.headers["X-Request-Id"] == "abc123"


class TestPage:
    """Page route."""

    def test_homepage_document(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert response.text.count('class="prompt-block category-card') == 2
        assert 'id="detail-view" class="hidden"' in response.text

    def test_reload_resets_navigation(self, client):
        client.post(EVENTS_URL, json={"event": "see_all", "category": "Writing"})
        response = client.get("/")
        assert 'id="detail-view" class="hidden"' in response.text
        assert 'id="homepage-view" class="hidden"' not in response.text

    def test_page_script_is_served(self, client):
        page = client.get("/")
        assert f'<script src="{SCRIPT_URL}"' in page.text

        response = client.get(SCRIPT_URL)
        assert response.status_code == 200
        assert "javascript" in response.headers["content-type"]
        assert "data-subcategory" in response.text
        assert "/ui/events" in response.text

    def test_load_failure_shows_error(self, failed_client):
        response = failed_client.get("/")
        assert response.status_code == 200
        assert LOAD_ERROR_MESSAGE in response.text


class TestUIEvents:
    """Event endpoint drives the navigation controller."""

    def test_see_all(self, client):
        response = client.post(EVENTS_URL, json={"event": "see_all", "category": "Writing"})
        assert response.status_code == 200
        data = response.json()
        assert data["view"] == "detail"
        assert data["active_category"] == "Writing"
        assert data["active_subcategory"] == "Essays"
        assert "hidden" in data["regions"]["homepage-view"]["classes"]
        assert "hidden" not in data["regions"]["detail-view"]["classes"]
        assert data["scroll_y"] == 0

    def test_search_single_character_keeps_cards(self, client):
        response = client.post(EVENTS_URL, json={"event": "search_input", "value": "e"})
        regions = response.json()["regions"]
        assert "hidden" not in regions["category-cards-container"]["classes"]
        assert "hidden" in regions["search-results-container"]["classes"]

    def test_search_no_results(self, client):
        response = client.post(EVENTS_URL, json={"event": "search_input", "value": "zzzzz"})
        regions = response.json()["regions"]
        assert "No prompts found." in regions["search-results-container"]["html"]
        assert "hidden" in regions["category-cards-container"]["classes"]

    def test_unknown_subcategory_is_404(self, client):
        response = client.post(
            EVENTS_URL,
            json={"event": "select_subcategory", "category": "Writing", "subcategory": "Limericks"},
        )
        assert response.status_code == 404

    def test_sidebar_from_homepage_is_409(self, client):
        client.get("/")
        response = client.post(
            EVENTS_URL,
            json={"event": "select_sidebar_link", "category": "Writing", "subcategory": "Poems"},
        )
        assert response.status_code == 409

    def test_missing_arguments_is_400(self, client):
        response = client.post(EVENTS_URL, json={"event": "see_all"})
        assert response.status_code == 400

    def test_unknown_event_is_422(self, client):
        response = client.post(EVENTS_URL, json={"event": "double_click"})
        assert response.status_code == 422

    def test_copy_failure_returns_alert_once(self, client):
        controller = client.app.state.gallery.controller

        def failing_writer(text):
            raise OSError("no clipboard")

        controller.clipboard = ClipboardHelper(
            notifier=controller.notify, writer=failing_writer, scheduler=lambda delay, cb: None
        )
        client.post(EVENTS_URL, json={"event": "see_all", "category": "Writing"})

        response = client.post(EVENTS_URL, json={"event": "copy_prompt", "index": 0})
        assert response.json()["alert"] == "Failed to copy text."

        response = client.get(f"{settings.api_v1_prefix}/ui/surface")
        assert response.json()["alert"] is None

    def test_copy_success(self, client):
        controller = client.app.state.gallery.controller
        writes = []
        controller.clipboard = ClipboardHelper(
            notifier=controller.notify, writer=writes.append, scheduler=lambda delay, cb: None
        )
        client.post(EVENTS_URL, json={"event": "see_all", "category": "Writing"})

        response = client.post(EVENTS_URL, json={"event": "copy_prompt", "index": 1})
        assert response.status_code == 200
        assert writes == ["Outline a persuasive piece on climate policy"]
        assert "Copied!" in response.json()["regions"]["prompt-display-area"]["html"]

    def test_events_rejected_after_load_failure(self, failed_client):
        response = failed_client.post(EVENTS_URL, json={"event": "back"})
        assert response.status_code == 503


class TestCatalogRoutes:
    """Read-only JSON routes."""

    def test_catalog_document(self, client, sample_document):
        response = client.get(f"{settings.api_v1_prefix}/catalog")
        assert response.status_code == 200
        assert response.json() == sample_document

    def test_categories(self, client):
        response = client.get(f"{settings.api_v1_prefix}/categories")
        assert response.json()[0] == {
            "name": "Writing",
            "subcategories": ["Essays", "Poems"],
            "prompt_count": 3,
        }

    def test_search(self, client):
        response = client.get(f"{settings.api_v1_prefix}/search", params={"q": "essay"})
        results = response.json()
        assert len(results) == 1
        assert results[0]["category"] == "Writing"
        assert results[0]["subcategory"] == "Essays"

    def test_search_short_query(self, client):
        response = client.get(f"{settings.api_v1_prefix}/search", params={"q": "e"})
        assert response.json() == []

    def test_catalog_unavailable_after_load_failure(self, failed_client):
        response = failed_client.get(f"{settings.api_v1_prefix}/catalog")
        assert response.status_code == 503
