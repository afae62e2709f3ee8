"""
Driver portrait resolution

Turns a driver id into an image URL the front-end can drop straight into an
<img> tag: a Wikipedia thumbnail when one exists, otherwise a generated SVG
badge with the driver's initials. Results (placeholders included) are cached
for the lifetime of the cache backend, and concurrent requests for the same
driver share a single lookup.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from threading import Lock
from typing import Dict, Iterable, List, Optional
from urllib.parse import quote
from xml.sax.saxutils import escape

from f1stats.cache_layer import CACHE_KEYS, CACHE_TTL, CacheLayer
from f1stats.errors import ImageLookupError
from f1stats.models import DriverRef

logger = logging.getLogger(__name__)

# Wikipedia article titles for ids whose API display name doesn't match
WIKIPEDIA_NAMES = {
    "hamilton": "Lewis Hamilton",
    "bottas": "Valtteri Bottas",
    "max_verstappen": "Max Verstappen",
    "perez": "Sergio Pérez",
    "leclerc": "Charles Leclerc",
    "sainz": "Carlos Sainz",
    "norris": "Lando Norris",
    "piastri": "Oscar Piastri",
    "alonso": "Fernando Alonso",
    "stroll": "Lance Stroll",
    "ocon": "Esteban Ocon",
    "gasly": "Pierre Gasly",
    "albon": "Alexander Albon",
    "sargeant": "Logan Sargeant",
    "tsunoda": "Yuki Tsunoda",
    "ricciardo": "Daniel Ricciardo",
    "zhou": "Zhou Guanyu",
    "hulkenberg": "Nico Hülkenberg",
    "magnussen": "Kevin Magnussen",
    "russell": "George Russell",
    "max": "Max Verstappen",
    "lando": "Lando Norris",
    "daniel": "Daniel Ricciardo",
    "lando_norris": "Lando Norris",
    "charles_leclerc": "Charles Leclerc",
    "carlos_sainz": "Carlos Sainz",
    "oscar_piastri": "Oscar Piastri",
}

SEARCH_SUFFIXES = (" Formula One driver", " racing driver", "")

PLACEHOLDER_PALETTE = ("#DC2626", "#2563EB", "#059669", "#D97706", "#7C3AED", "#DB2777")

PLACEHOLDER_SVG = """<svg width="400" height="400" viewBox="0 0 400 400" xmlns="http://www.w3.org/2000/svg">
  <defs>
    <radialGradient id="grad" cx="30%" cy="30%" r="70%">
      <stop offset="0%" style="stop-color:{start};stop-opacity:0.9" />
      <stop offset="100%" style="stop-color:{end};stop-opacity:0.7" />
    </radialGradient>
  </defs>
  <circle cx="200" cy="200" r="200" fill="url(#grad)"/>
  <text x="200" y="220" font-family="Arial, sans-serif" font-size="140" font-weight="bold" fill="white" text-anchor="middle" dy=".35em">{initials}</text>
</svg>"""

PLACEHOLDER_PREFIX = "data:image/svg+xml,"


# =============================================================================
# PLACEHOLDERS
# =============================================================================
def placeholder_initials(driver_id: str) -> str:
    """"max_verstappen" -> "MV", "totally_unknown_id" -> "TU", "hamilton" -> "H" """
    return "".join(part[:1].upper() for part in driver_id.split("_"))[:2]


def placeholder_colors(driver_id: str) -> tuple:
    index = sum(ord(c) for c in driver_id) % len(PLACEHOLDER_PALETTE)
    return PLACEHOLDER_PALETTE[index], PLACEHOLDER_PALETTE[(index + 2) % len(PLACEHOLDER_PALETTE)]


def placeholder_svg(driver_id: str) -> str:
    start, end = placeholder_colors(driver_id)
    return PLACEHOLDER_SVG.format(start=start, end=end, initials=escape(placeholder_initials(driver_id)))


def generate_driver_placeholder(driver_id: str) -> str:
    """Deterministic badge for ``driver_id`` as a self-contained data URI"""
    # same safe set as JavaScript's encodeURIComponent
    return PLACEHOLDER_PREFIX + quote(placeholder_svg(driver_id), safe="-_.!~*'()")


def is_placeholder(url: Optional[str]) -> bool:
    return bool(url) and url.startswith(PLACEHOLDER_PREFIX)


def name_from_driver_id(driver_id: str) -> str:
    return " ".join(word.capitalize() for word in driver_id.split("_") if word)


def search_terms(driver_id: str, display_name: Optional[str] = None) -> List[str]:
    """Wikipedia titles to try, most specific first"""
    name = WIKIPEDIA_NAMES.get(driver_id.lower()) or (display_name or "").strip() or name_from_driver_id(driver_id)
    return [f"{name}{suffix}" for suffix in SEARCH_SUFFIXES]


# =============================================================================
# RESOLVER
# =============================================================================
class DriverImageResolver:
    """
    Resolves driver ids to portrait URLs.

    Args:
        source: object with ``lookup(title) -> Optional[str]`` (see
            WikipediaImageSource); may raise ImageLookupError.
        cache: CacheLayer holding resolved URLs under ``driver_image:<id>``.
        max_workers: thread pool size used by ``resolve_many``.
    """

    def __init__(self, source, cache: CacheLayer, max_workers: int = 4):
        self.source = source
        self.cache = cache
        self.max_workers = max_workers
        self.lock = Lock()
        self.in_flight: Dict[str, Future] = {}

    @staticmethod
    def cache_key(driver_id: str) -> str:
        return f"{CACHE_KEYS['DRIVER_IMAGE']}:{driver_id}"

    def resolve(self, driver_id: str, display_name: Optional[str] = None) -> str:
        if not driver_id:
            raise ValueError("driver_id must be a non-empty string")

        key = self.cache_key(driver_id)
        cached = self.cache.get(key)
        if cached:
            return cached

        # only in-memory state is touched under the lock, never the cache backend
        with self.lock:
            future = self.in_flight.get(driver_id)
            owner = future is None
            if owner:
                future = Future()
                self.in_flight[driver_id] = future

        if not owner:
            logger.debug(f"Waiting on in-flight image lookup for {driver_id}")
            return future.result()

        try:
            # a previous owner may have finished between the first check and registering
            url = self.cache.get(key)
            if not url:
                url = self._lookup(driver_id, display_name)
                self.cache.set(key, url, ttl_seconds=CACHE_TTL["DRIVER_IMAGE"])
        except BaseException as e:
            future.set_exception(e)
            raise
        else:
            future.set_result(url)
            return url
        finally:
            with self.lock:
                self.in_flight.pop(driver_id, None)

    def resolve_ref(self, ref: DriverRef) -> str:
        return self.resolve(ref.driver_id, ref.display_name)

    def resolve_many(self, refs: Iterable[DriverRef]) -> Dict[str, str]:
        """Resolve several drivers in parallel, {driver_id: url}"""
        refs = list(dict.fromkeys(refs))
        if not refs:
            return {}
        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(refs))) as pool:
            urls = list(pool.map(self.resolve_ref, refs))
        return {ref.driver_id: url for ref, url in zip(refs, urls)}

    def is_in_flight(self, driver_id: str) -> bool:
        with self.lock:
            return driver_id in self.in_flight

    def _lookup(self, driver_id: str, display_name: Optional[str]) -> str:
        try:
            for term in search_terms(driver_id, display_name):
                url = self.source.lookup(term)
                if url:
                    logger.info(f"✓ Portrait for {driver_id} found via {term!r}")
                    return url
            logger.info(f"No portrait found for {driver_id}, using placeholder")
        except ImageLookupError as e:
            logger.warning(f"Portrait lookup failed for {driver_id}: {e}")
        return generate_driver_placeholder(driver_id)

    def health_check(self) -> dict:
        with self.lock:
            in_flight = len(self.in_flight)
        return {"in_flight": in_flight, "cache": self.cache.health_check()}
