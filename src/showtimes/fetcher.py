"""HTTP access to the showtime service."""

import logging
from typing import Any

import httpx

from showtimes.config import ClientConfig, Settings, settings
from showtimes.exceptions import FetchError, UnexpectedStatusError

logger = logging.getLogger(__name__)

UNKNOWN_ERROR = "Unknown error occurred while querying showtime data"

# Turkish pages are served in a legacy 8-bit encoding without saying so.
# cp1254 agrees with ISO-8859-9 (latin5) on letters and also maps 0x9B to "›".
LEGACY_ENCODINGS: dict[str, str] = {
    "tr": "cp1254",
}


def decode_page(raw: bytes, lang: str) -> str | bytes:
    """
    Prepare raw page bytes for parsing.

    Languages listed in LEGACY_ENCODINGS are decoded explicitly; everything
    else is handed to the parser as bytes so it can detect the encoding.
    """
    encoding = LEGACY_ENCODINGS.get(lang)
    if encoding is None:
        return raw
    return raw.decode(encoding, errors="replace")


class PageFetcher:
    """Fetches one results page per call. Never retries."""

    def __init__(self, config: ClientConfig, app_settings: Settings | None = None) -> None:
        self.config = config
        self.settings = app_settings or settings

    def build_params(self, page: int = 1, **extra: Any) -> dict[str, Any]:
        """
        Query parameters for one results page.

        Args:
            page: 1-based page number
            **extra: Additional parameters (q, tid, mid, sort); None values are dropped

        Returns:
            Query parameter mapping
        """
        params: dict[str, Any] = {
            "hl": self.config.lang,
            "near": self.config.location,
            "date": self.config.date,
            "start": (page - 1) * self.settings.results_per_page,
        }
        params.update({key: value for key, value in extra.items() if value is not None})
        return params

    async def fetch(self, page: int = 1, **extra: Any) -> bytes:
        """
        Fetch the raw bytes of one results page.

        Raises:
            FetchError: The request failed in transport
            UnexpectedStatusError: The service answered with a non-200 status
        """
        params = self.build_params(page, **extra)
        logger.info(f"Fetching showtimes page {page} for {self.config.location!r}")

        try:
            async with httpx.AsyncClient(
                timeout=self.settings.request_timeout,
                headers={"User-Agent": self.settings.user_agent},
                follow_redirects=True,
            ) as client:
                response = await client.get(self.settings.base_url, params=params)
        except httpx.HTTPError as e:
            logger.error(f"Showtimes request failed: {e}")
            raise FetchError(str(e) or UNKNOWN_ERROR) from e

        if response.status_code != 200:
            logger.error(f"Showtimes request returned HTTP {response.status_code}")
            raise UnexpectedStatusError(response.status_code)

        return response.content
