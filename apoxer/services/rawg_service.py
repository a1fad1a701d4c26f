"""
Fills missing game descriptions and artwork from the RAWG API
"""
import logging
import re
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests

from apoxer.constants import BUILD_VERSION
from apoxer.exceptions import ApoxerException
from apoxer.repositories.games_repository import GamesRepository
from apoxer.settings import get_setting

logger = logging.getLogger("main")

# API Configuration
RAWG_BASE_URL = "https://api.rawg.io/api"

_tags = re.compile(r"<[^>]+>")


class RAWGAPIException(ApoxerException):
    """The RAWG API could not be reached or answered with an error"""
    status_code = 502

    def __init__(self, message: str):
        super().__init__(message, code="RAWG_ERROR")
        logger.error(f"RAWG error: {message}")


class RAWGClient:
    """Client for RAWG API"""

    def __init__(self, api_key: str, rate_limit_delay: float = 0.5):
        self.api_key = api_key
        self.session = requests.Session()
        self.session.headers.update({
            "User-Agent": f"Apoxer/{BUILD_VERSION}"
        })
        self.last_request_time = 0
        self.rate_limit_delay = rate_limit_delay  # 2 requests per second

    def _rate_limit(self):
        """Ensure we don't exceed rate limits"""
        elapsed = time.time() - self.last_request_time
        if elapsed < self.rate_limit_delay:
            time.sleep(self.rate_limit_delay - elapsed)
        self.last_request_time = time.time()

    def _get(self, path: str, **params) -> Dict[str, Any]:
        self._rate_limit()
        try:
            response = self.session.get(
                f"{RAWG_BASE_URL}{path}",
                params={"key": self.api_key, **params},
                timeout=10
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            raise RAWGAPIException(f"RAWG request {path} failed: {e}")

    def search_game(self, title: str) -> Optional[Dict]:
        """Search for a game by title, best match first"""
        results = self._get("/games", search=title, page_size=5).get("results", [])
        if not results:
            logger.warning(f"No RAWG results for '{title}'")
            return None
        return results[0]

    def get_game_details(self, rawg_id: int) -> Dict[str, Any]:
        """Get detailed game information by RAWG ID"""
        return self._get(f"/games/{rawg_id}")


def normalize_details(details: Dict[str, Any]) -> Dict[str, Any]:
    """Map a RAWG game payload onto Game columns"""
    description = details.get("description_raw") or _tags.sub("", details.get("description") or "").strip()
    return {
        "description": description or None,
        "cover_url": details.get("background_image"),
        "hero_url": details.get("background_image_additional") or details.get("background_image"),
    }


@dataclass
class EnrichResult:
    updated: int = 0
    skipped: int = 0
    errors: List[str] = field(default_factory=list)


def enrich_games(client: Optional[RAWGClient] = None, limit: Optional[int] = None) -> EnrichResult:
    """
    Fill in description and artwork for games that lack them.

    Only empty columns are written; games that are already complete are
    not requested at all.
    """
    if client is None:
        api_key = get_setting("apis", "rawg_api_key", "")
        if not api_key:
            raise RAWGAPIException("No RAWG API key configured (apis.rawg_api_key)")
        client = RAWGClient(api_key)

    result = EnrichResult()
    for game in GamesRepository.get_incomplete(limit=limit):
        try:
            match = client.search_game(game.title)
            if not match:
                result.skipped += 1
                continue
            found = normalize_details(client.get_game_details(match["id"]))
        except RAWGAPIException as e:
            result.errors.append(f"{game.title}: {e.message}")
            continue

        current = {"description": game.description, "cover_url": game.cover_url, "hero_url": game.hero_url}
        changes = {key: value for key, value in found.items() if value and not current[key]}
        if not changes:
            result.skipped += 1
            continue

        GamesRepository.update(game.id, **changes)
        result.updated += 1
        logger.info(f"Enriched {game.slug} with {', '.join(sorted(changes))}")

    return result
