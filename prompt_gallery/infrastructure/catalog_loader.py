"""Loads the prompt catalog document once at startup.

The source is either a filesystem path or an http(s) URL. Loading is
all-or-nothing: any failure raises :class:`CatalogLoadError` and no partial
catalog is returned. There is no retry and no timeout.
"""

import json
import logging
from pathlib import Path

import httpx
from pydantic import ValidationError

from prompt_gallery.domain.models.catalog import Catalog

logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """Raised when the prompt catalog cannot be fetched or parsed."""

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Failed to load prompts from {source}: {reason}")


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class CatalogLoader:
    """Fetches and parses the ``promptData`` document."""

    def __init__(
        self,
        source: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize loader.

        Args:
            source: Path or http(s) URL of the JSON document
            transport: Optional httpx transport (tests inject a mock one)
        """
        self.source = source
        self.transport = transport

    async def _fetch(self) -> str:
        if _is_url(self.source):
            async with httpx.AsyncClient(timeout=None, transport=self.transport) as client:
                resp = await client.get(self.source)
                resp.raise_for_status()
                return resp.text
        return Path(self.source).read_text(encoding="utf-8")

    async def load(self) -> Catalog:
        """Fetch the document and build the catalog.

        Returns:
            The loaded catalog

        Raises:
            CatalogLoadError: On network error, non-success status, unreadable
                file, malformed JSON or a document of the wrong shape
        """
        try:
            raw = await self._fetch()
            catalog = Catalog.from_document(json.loads(raw))
        except httpx.HTTPStatusError as e:
            error = CatalogLoadError(self.source, f"HTTP error! status: {e.response.status_code}")
        except httpx.HTTPError as e:
            error = CatalogLoadError(self.source, f"{type(e).__name__}: {e}")
        except OSError as e:
            error = CatalogLoadError(self.source, str(e))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            error = CatalogLoadError(self.source, f"invalid JSON: {e}")
        except (ValidationError, TypeError) as e:
            error = CatalogLoadError(self.source, f"invalid prompt document: {e}")
        else:
            logger.info(
                f"[CATALOG] Loaded {len(catalog)} categories from {self.source}",
                extra={"category_count": len(catalog)},
            )
            return catalog

        logger.error(f"[CATALOG] Failed to load prompts: {error.reason}", extra={"source": self.source})
        raise error
