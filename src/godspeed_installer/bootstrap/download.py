"""Secure download utilities with SSL certificate handling.

Downloads are verified against certifi's CA bundle so they work on macOS
interpreters that cannot reach the system certificate store.
"""

from __future__ import annotations

import shutil
import ssl
from pathlib import Path
from typing import Optional
from urllib.error import URLError
from urllib.request import urlopen

import certifi

from godspeed_installer.core.errors import DownloadError
from godspeed_installer.core.logging import get_logger

LOGGER = get_logger(__name__)


def get_ssl_context() -> ssl.SSLContext:
    """Get an SSL context that uses certifi's CA bundle."""
    return ssl.create_default_context(cafile=certifi.where())


def secure_urlopen(url: str, timeout: Optional[float] = None):
    """Open a URL with proper SSL certificate verification.

    Args:
        url: The URL to open.
        timeout: Optional socket timeout in seconds.

    Returns:
        A file-like object for reading the response.

    Raises:
        URLError: If the URL cannot be opened.
        ValueError: If the URL is not HTTPS.
    """
    if not url.startswith("https://"):
        raise ValueError(f"Only HTTPS URLs are supported: {url}")

    return urlopen(url, timeout=timeout, context=get_ssl_context())  # nosec B310


def download_file(url: str, dest_path: Path, timeout: Optional[float] = None) -> Path:
    """Download a file over HTTPS, following redirects.

    The body is streamed to a sibling ``.part`` file and renamed into place
    so an interrupted download never leaves a truncated file at dest_path.

    Args:
        url: The URL to download from.
        dest_path: Path to save the downloaded file.
        timeout: Optional socket timeout in seconds.

    Returns:
        dest_path.

    Raises:
        ValueError: If the URL is not HTTPS.
        DownloadError: If the transfer or the write fails.
    """
    LOGGER.info(f"Downloading {url} -> {dest_path}")
    partial = dest_path.with_name(dest_path.name + ".part")
    try:
        with secure_urlopen(url, timeout=timeout) as response, open(partial, "wb") as out:
            shutil.copyfileobj(response, out)
        partial.replace(dest_path)
    except (URLError, OSError) as e:
        partial.unlink(missing_ok=True)
        raise DownloadError(f"Failed to download {url}: {e}") from e
    return dest_path
