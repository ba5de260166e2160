"""Pytest configuration and fixtures."""

import json

import pytest

from prompt_gallery.domain.models.catalog import Catalog
from prompt_gallery.domain.services.navigation_service import NavigationController
from prompt_gallery.domain.services.search_service import SearchService
from prompt_gallery.infrastructure.clipboard import ClipboardHelper

SAMPLE_DOCUMENT = {
    "promptData": {
        "Writing": {
            "Essays": [
                {"title": "Intro", "content": "Write an essay about X"},
                {"title": "Outline", "content": "Outline a persuasive piece on climate policy"},
            ],
            "Poems": [
                {"title": "Haiku", "content": "Compose a haiku about autumn leaves"},
            ],
        },
        "Coding": {
            "Python": [
                {"title": "Refactor", "content": "Refactor this function for readability"},
                {"title": "Write tests", "content": "Write pytest tests for the following module"},
            ],
            "SQL": [
                {"title": "Query review", "content": "Review this SQL query for performance issues"},
            ],
        },
    }
}


class FakeScheduler:
    """Records timers instead of running them."""

    def __init__(self):
        self.calls = []

    def __call__(self, delay_seconds, callback):
        self.calls.append((delay_seconds, callback))

    def fire_all(self):
        calls, self.calls = self.calls, []
        for _, callback in calls:
            callback()


@pytest.fixture
def sample_document():
    """A fresh copy of the sample promptData document."""
    return json.loads(json.dumps(SAMPLE_DOCUMENT))


@pytest.fixture
def catalog(sample_document):
    """Catalog built from the sample document."""
    return Catalog.from_document(sample_document)


@pytest.fixture
def prompts_file(tmp_path, sample_document):
    """The sample document written to disk."""
    path = tmp_path / "prompts.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def clipboard_writes():
    """Texts written through the fake clipboard."""
    return []


@pytest.fixture
def controller(catalog, scheduler, clipboard_writes):
    """A started navigation controller with a fake clipboard."""
    nav = NavigationController(catalog, SearchService(catalog))
    nav.clipboard = ClipboardHelper(
        notifier=nav.notify,
        writer=clipboard_writes.append,
        scheduler=scheduler,
        feedback_ms=2000,
    )
    nav.start()
    return nav
