"""HTTP client with retry logic for fetching remote datasets."""

import logging
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

logger = logging.getLogger("candidate_portal.http")

USER_AGENT = "candidate-portal/0.1 (+dataset loader)"


def create_session(max_retries: int = 3, backoff_factor: float = 1.0) -> requests.Session:
    """Create a requests session with retry logic."""
    session = requests.Session()

    retry_strategy = Retry(
        total=max_retries,
        backoff_factor=backoff_factor,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
    )

    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("http://", adapter)
    session.mount("https://", adapter)

    session.headers.update({
        "User-Agent": USER_AGENT,
        "Accept": "application/json,text/plain;q=0.9,*/*;q=0.8",
    })

    return session


def safe_get(
    url: str,
    session: Optional[requests.Session] = None,
    timeout: int = 30,
    **kwargs,
) -> Optional[requests.Response]:
    """Perform a GET request, returning None on failure instead of raising."""
    if session is None:
        session = create_session()

    try:
        response = session.get(url, timeout=timeout, **kwargs)
        response.raise_for_status()
        return response
    except requests.RequestException as e:
        logger.warning("HTTP request failed for %s: %s", url, e)
        return None
