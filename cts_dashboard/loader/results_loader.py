"""Fetches and parses the raw results dataset into test records."""

from __future__ import annotations

import asyncio
import csv
import io
import logging
import zipfile
from pathlib import Path

import aiohttp

from cts_dashboard.models.test_result import TestRecord

logger = logging.getLogger(__name__)


class LoadError(Exception):
    """Raised when the results dataset cannot be fetched or parsed."""


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _decode(payload: bytes, source: str) -> str:
    """Decode a CSV payload, unpacking the first entry of a zip archive."""
    if zipfile.is_zipfile(io.BytesIO(payload)):
        try:
            with zipfile.ZipFile(io.BytesIO(payload)) as archive:
                entries = [i for i in archive.infolist() if not i.is_dir()]
                if not entries:
                    raise LoadError(f"Archive is empty: {source}")
                logger.debug("Reading %s from archive %s", entries[0].filename, source)
                payload = archive.read(entries[0])
        except zipfile.BadZipFile as e:
            raise LoadError(f"Corrupt archive {source}: {e}") from e
    try:
        return payload.decode("utf-8")
    except UnicodeDecodeError as e:
        raise LoadError(f"Results are not valid UTF-8: {source}") from e


async def _fetch_url(url: str, timeout: float) -> bytes:
    try:
        async with aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=timeout)
        ) as session:
            async with session.get(url) as response:
                response.raise_for_status()
                return await response.read()
    except aiohttp.ClientResponseError as e:
        raise LoadError(f"Fetching {url} failed with HTTP {e.status}") from e
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        raise LoadError(f"Fetching {url} failed: {e}") from e


async def fetch_results(source: str, timeout: float = 60.0) -> str:
    """Return the raw CSV text behind ``source`` (a path or an http(s) URL)."""
    if not source:
        raise LoadError("No results source configured")
    if _is_url(source):
        payload = await _fetch_url(source, timeout)
    else:
        path = Path(source)
        try:
            payload = path.read_bytes()
        except OSError as e:
            raise LoadError(f"Cannot read {path}: {e}") from e
    logger.debug("Fetched %d bytes from %s", len(payload), source)
    return _decode(payload, source)


def parse_results(text: str) -> list[TestRecord]:
    """Parse CSV text (header row first) into records, in file order.

    Any malformed row fails the whole parse.
    """
    reader = csv.reader(io.StringIO(text))
    records: list[TestRecord] = []
    try:
        next(reader, None)  # header
        for row in reader:
            if not row:
                continue
            try:
                records.append(TestRecord.from_row(row))
            except ValueError as e:
                raise LoadError(f"Line {reader.line_num}: {e}") from e
    except csv.Error as e:
        raise LoadError(f"Line {reader.line_num}: {e}") from e
    return records


async def load_results(source: str, timeout: float = 60.0) -> list[TestRecord]:
    """Fetch and parse the results dataset."""
    text = await fetch_results(source, timeout)
    records = parse_results(text)
    logger.debug("Parsed %d records from %s", len(records), source)
    return records
