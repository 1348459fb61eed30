"""
Google Custom Search API integration for site-scoped councillor searches.
"""
import requests
import time
import logging
from typing import List, Dict, Optional

from pydantic import ValidationError

from config.settings import get_settings, Settings
from models.search_result import SearchResultItem


class GoogleSearcher:
    """Handles Google Custom Search API calls, one page per query."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.api_key = self.settings.google_api_key
        self.cse_id = self.settings.google_cse_id
        self.api_calls_made = 0

        if not self.api_key or not self.cse_id:
            raise ValueError("Google API key and Custom Search Engine ID must be set in .env file")

    def _request(self, query: str) -> Optional[requests.Response]:
        params = {
            'key': self.api_key,
            'cx': self.cse_id,
            'q': query,
            'num': self.settings.max_search_results,
            'gl': self.settings.search_country,
        }
        headers = {'User-Agent': self.settings.user_agent}
        if self.settings.referer:
            headers['Referer'] = self.settings.referer

        for attempt in range(self.settings.max_retries):
            try:
                logging.debug(f"Making API call {self.api_calls_made + 1}: {query}")
                response = requests.get(
                    self.settings.google_search_url,
                    params=params,
                    headers=headers,
                    timeout=self.settings.request_timeout_seconds,
                )
                self.api_calls_made += 1
                return response
            except requests.exceptions.RequestException as e:
                logging.error(f"Request error on attempt {attempt + 1}: {e}")
                if attempt < self.settings.max_retries - 1:
                    time.sleep(2 ** attempt)  # Exponential backoff
        return None

    def search(self, query: str) -> Optional[List[SearchResultItem]]:
        """Run one query.

        Returns the result items, ``[]`` when the API answered with no items
        (or refused with 429, meaning the quota is spent), and ``None`` when
        the request failed or the response could not be parsed.
        """
        if self.api_calls_made and self.settings.search_delay_seconds:
            time.sleep(self.settings.search_delay_seconds)

        response = self._request(query)
        if response is None:
            return None
        if response.status_code == 429:
            logging.warning("API rate limit exceeded")
            return []
        if response.status_code != 200:
            logging.error(f"API request failed with status {response.status_code}: {response.text}")
            return None

        try:
            data = response.json()
            items = data.get('items') or []
            return [SearchResultItem.model_validate(item) for item in items]
        except (ValueError, AttributeError, ValidationError) as e:
            logging.error(f"Could not parse search response: {e}")
            return None

    def get_api_usage(self) -> Dict:
        """Return API usage statistics."""
        return {
            'api_calls_made': self.api_calls_made,
            'estimated_daily_limit_used': f"{(self.api_calls_made / 100) * 100:.1f}%"
        }
