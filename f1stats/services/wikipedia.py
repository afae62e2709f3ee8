"""
Wikipedia page-image lookups for driver portraits
"""

import logging
from typing import Optional

import requests

from f1stats.errors import ImageLookupError

logger = logging.getLogger(__name__)

WIKIPEDIA_API_URL = "https://en.wikipedia.org/w/api.php"


class WikipediaImageSource:
    """
    Looks up the infobox thumbnail of a Wikipedia page by title.

    ``lookup`` returns the thumbnail URL, or None when the page doesn't exist,
    has no image or the API answers with a non-200 status. Network errors,
    timeouts and unreadable payloads raise ImageLookupError.
    """

    def __init__(self, api_url: str = WIKIPEDIA_API_URL, thumb_size: int = 400,
                 timeout: float = 8, user_agent: str = "F1Stats/1.0",
                 session: Optional[requests.Session] = None):
        self.api_url = api_url
        self.thumb_size = thumb_size
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": user_agent,
        })

    def lookup(self, title: str) -> Optional[str]:
        try:
            r = self.session.get(
                self.api_url,
                params={
                    "action": "query",
                    "format": "json",
                    "titles": title,
                    "prop": "pageimages",
                    "pithumbsize": self.thumb_size,
                },
                timeout=self.timeout
            )
        except requests.RequestException as e:
            raise ImageLookupError(f"Wikipedia request failed for {title!r}: {e}") from e

        if r.status_code != 200:
            logger.debug(f"Wikipedia returned {r.status_code} for {title!r}")
            return None

        try:
            pages = r.json()["query"]["pages"]
        except (ValueError, KeyError, TypeError) as e:
            raise ImageLookupError(f"Unexpected Wikipedia payload for {title!r}: {e}") from e

        if not isinstance(pages, dict) or not pages:
            return None

        page_id, page = next(iter(pages.items()))
        if page_id == "-1" or not isinstance(page, dict):
            return None
        return (page.get("thumbnail") or {}).get("source")
