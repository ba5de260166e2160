"""Tests for the catalog loader."""

import json
import logging

import httpx
import pytest

from prompt_gallery.infrastructure.catalog_loader import CatalogLoader, CatalogLoadError

URL = "https://prompts.example.com/prompts.json"


def _transport(handler):
    return httpx.MockTransport(handler)


@pytest.mark.asyncio
async def test_loads_from_file(prompts_file):
    """Test loading the document from a local path."""
    catalog = await CatalogLoader(str(prompts_file)).load()
    assert catalog.categories() == ["Writing", "Coding"]


@pytest.mark.asyncio
async def test_loads_from_url(sample_document):
    """Test loading the document with a single GET."""
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json=sample_document)

    catalog = await CatalogLoader(URL, transport=_transport(handler)).load()

    assert catalog.subcategories("Writing") == ["Essays", "Poems"]
    assert len(requests) == 1
    assert requests[0].method == "GET"
    assert str(requests[0].url) == URL


@pytest.mark.asyncio
async def test_non_success_status_is_not_retried():
    """Test a 500 response fails once, without retry."""
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(500, text="boom")

    with pytest.raises(CatalogLoadError) as exc_info:
        await CatalogLoader(URL, transport=_transport(handler)).load()

    assert "500" in exc_info.value.reason
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_network_error():
    """Test a connection failure is a load failure."""
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(CatalogLoadError):
        await CatalogLoader(URL, transport=_transport(handler)).load()


@pytest.mark.asyncio
async def test_invalid_json(tmp_path):
    """Test a malformed file is a load failure."""
    path = tmp_path / "prompts.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(CatalogLoadError) as exc_info:
        await CatalogLoader(str(path)).load()
    assert "invalid JSON" in exc_info.value.reason


@pytest.mark.asyncio
async def test_wrong_shape(tmp_path):
    """Test a document without promptData is a load failure."""
    path = tmp_path / "prompts.json"
    path.write_text(json.dumps({"categories": []}), encoding="utf-8")

    with pytest.raises(CatalogLoadError) as exc_info:
        await CatalogLoader(str(path)).load()
    assert "invalid prompt document" in exc_info.value.reason


@pytest.mark.asyncio
async def test_missing_file(tmp_path):
    """Test a missing file is a load failure."""
    with pytest.raises(CatalogLoadError):
        await CatalogLoader(str(tmp_path / "missing.json")).load()


@pytest.mark.asyncio
async def test_failure_is_logged_once(tmp_path, caplog):
    """Test the error is logged exactly once."""
    with caplog.at_level(logging.ERROR, logger="prompt_gallery.infrastructure.catalog_loader"):
        with pytest.raises(CatalogLoadError):
            await CatalogLoader(str(tmp_path / "missing.json")).load()

    errors = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors) == 1
    assert "Failed to load prompts" in errors[0].getMessage()
