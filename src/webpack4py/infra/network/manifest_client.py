from __future__ import annotations

import logging
from typing import Any, Dict

import requests

from webpack4py.domain.errors import ManifestLoadError
from webpack4py.infra.network.common import DEFAULT_TIMEOUT, USER_AGENT

logger = logging.getLogger(__name__)

PROBE_TIMEOUT = 3


def fetch_manifest_data(url: str, timeout: int = DEFAULT_TIMEOUT) -> Dict[str, Any]:
    """
    Acquire a manifest served by a running webpack dev server.

    Raises:
        ManifestLoadError: On timeouts, HTTP errors or a non-object JSON body.
    """
    headers = {"User-Agent": USER_AGENT}
    logger.debug(f"Fetching manifest from dev server: {url}")

    try:
        response = requests.get(url, headers=headers, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.Timeout as e:
        raise ManifestLoadError(url, f"timed out after {timeout}s") from e
    except ValueError as e:
        raise ManifestLoadError(url, f"invalid JSON: {e}") from e
    except requests.exceptions.RequestException as e:
        raise ManifestLoadError(url, f"communication error: {e}") from e

    if not isinstance(data, dict):
        raise ManifestLoadError(url, "root is not a JSON object")

    size_kb = len(response.content) / 1024
    logger.debug(f"Network: Manifest synchronized ({size_kb:.1f} KB).")
    return data


def probe_manifest(url: str) -> bool:
    """Check that the dev server answers for the manifest URL."""
    try:
        response = requests.head(
            url,
            headers={"User-Agent": USER_AGENT},
            timeout=PROBE_TIMEOUT,
            allow_redirects=True,
        )
        return response.status_code < 400
    except requests.exceptions.RequestException as e:
        logger.debug(f"Network: Dev server probe failed for {url}: {e}")
        return False
