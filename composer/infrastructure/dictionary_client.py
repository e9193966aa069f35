"""HTTP client for fetching remote dictionaries."""

import logging
import httpx
from typing import Optional, Tuple
from urllib.parse import urlparse
from shared.config.config import config
from shared.domain.models import DictionaryEntry
from shared.domain.errors import InvalidDictionary
from shared.domain.consts import DictionaryFormat
from composer.infrastructure.dictionary_loader import detect_format, parse_dictionary

logger = logging.getLogger(__name__)


class DictionaryClient:
    """
    HTTP client for downloading dictionaries.
    
    The format is taken from the URL path suffix (.csv / .json) and, when the
    path has none, from the response Content-Type.
    """
    
    def __init__(self, timeout: Optional[float] = None) -> None:
        """
        Initialize dictionary client.
        """
        self.client = httpx.AsyncClient(
            timeout=timeout if timeout is not None else config.DICTIONARY_REQUEST_TIMEOUT,
            follow_redirects=True,
        )
    
    async def fetch(self, url: str) -> Tuple[DictionaryEntry, ...]:
        """
        Download and parse a dictionary.
        
        Returns:
            Tuple of DictionaryEntry in document order.
            
        Raises:
            InvalidDictionary: On transport errors, non-2xx responses, an
                unknown format, or invalid records.
        """
        logger.info(f"Fetching dictionary from {url}")
        try:
            response = await self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise InvalidDictionary(
                f"Dictionary request to {url} failed with HTTP {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            raise InvalidDictionary(f"Dictionary request to {url} failed: {e}") from e
        
        fmt = self._detect_format(url, response.headers.get("content-type", ""))
        return parse_dictionary(response.text, fmt)
    
    @staticmethod
    def _detect_format(url: str, content_type: str) -> DictionaryFormat:
        path = urlparse(url).path
        if path.lower().endswith((".csv", ".json")):
            return detect_format(path)
        
        content_type = content_type.lower()
        if "json" in content_type:
            return DictionaryFormat.JSON
        if "csv" in content_type:
            return DictionaryFormat.CSV
        raise InvalidDictionary(
            f"Cannot determine dictionary format for {url} (Content-Type: {content_type or 'none'})"
        )
    
    async def close(self) -> None:
        """Close HTTP client."""
        await self.client.aclose()
