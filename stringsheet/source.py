#!/usr/bin/env python3
"""
Retrieval of the raw sheet export.

The source is either a local CSV file or an http(s) URL, typically a Google
Sheets "export?format=csv" link.
"""

from pathlib import Path

import requests

from .diagnostics import SourceError


DEFAULT_TIMEOUT = 30


def is_url(location: str) -> bool:
    return location.lower().startswith(("http://", "https://"))


def read_source(location: str, timeout: int = DEFAULT_TIMEOUT) -> bytes:
    """
    Read the raw bytes of the source sheet.

    Args:
        location: URL or path of the CSV export
        timeout: Seconds to wait for a remote response

    Returns:
        Raw file content

    Raises:
        SourceError: If the file is missing or the download fails
    """
    if not location:
        raise SourceError("No source location given")

    if is_url(location):
        try:
            resp = requests.get(location, timeout=timeout)
        except requests.RequestException as e:
            raise SourceError(
                f"Could not connect to {location}: {e}",
                suggestion="Check the URL and your network connection",
            )

        if not 200 <= resp.status_code < 300:
            raise SourceError(
                f"Response code {resp.status_code} from {location}: {resp.reason}",
                suggestion="Make sure the sheet is shared or published as CSV",
            )
        return resp.content

    path = Path(location)
    if not path.exists():
        raise SourceError(f"Source file not found: {location}")
    try:
        return path.read_bytes()
    except OSError as e:
        raise SourceError(f"Cannot read source file {location}: {e}")
