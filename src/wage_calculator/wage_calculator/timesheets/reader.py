from __future__ import annotations

import codecs
import io
import os
from pathlib import Path
from typing import Optional, TextIO
from urllib.parse import urlparse

import requests

from ..core.constants import DEFAULT_ENCODING
from ..core.exceptions import ValidationError

REQUEST_TIMEOUT_SECONDS = 30


def resolve_encoding(name: Optional[str]) -> str:
    encoding = name or DEFAULT_ENCODING
    try:
        return codecs.lookup(encoding).name
    except LookupError:
        raise ValidationError(f"unknown character encoding: {encoding}") from None


def open_timesheet(source: str, encoding: Optional[str] = None) -> TextIO:
    """Open a local file or an http(s) URL as text.

    A source that names an existing file must be readable; anything else must
    be a URL.
    """
    charset = resolve_encoding(encoding)
    path = Path(source)

    if path.exists():
        if not path.is_file() or not os.access(path, os.R_OK):
            raise ValidationError(f"file not readable: {path}")
        return path.open("r", encoding=charset, newline="")

    if urlparse(source).scheme not in {"http", "https"}:
        raise ValidationError(f"file not found: {path}")

    try:
        response = requests.get(source, timeout=REQUEST_TIMEOUT_SECONDS)
        response.raise_for_status()
    except requests.RequestException as e:
        raise ValidationError(f"cannot read {source}: {e}") from None

    return decode_upload(response.content, charset)


def decode_upload(content: bytes, encoding: Optional[str] = None) -> TextIO:
    charset = resolve_encoding(encoding)
    try:
        text = content.decode(charset)
    except UnicodeDecodeError as e:
        raise ValidationError(f"input is not valid {charset}: {e}") from None
    return io.StringIO(text, newline="")
