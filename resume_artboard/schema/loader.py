"""Decode resume JSON documents into typed records."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import msgspec
from loguru import logger

from .models import Resume, ResumeDocumentError

if typ.TYPE_CHECKING:
    from pathlib import Path


def load_resume(path: Path) -> Resume:
    """Read and decode the resume document stored at ``path``.

    Parameters
    ----------
    path : Path
        JSON file exported by the resume editor.

    Returns
    -------
    Resume
        Immutable document snapshot.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    ResumeDocumentError
        If the file is not valid JSON or does not match the document schema.
    """
    if not path.exists():
        msg = f"Resume document '{path}' not found."
        raise FileNotFoundError(msg)
    logger.debug("Decoding resume document {}", path)
    return parse_resume(path.read_bytes(), source=str(path))


def parse_resume(
    data: bytes | str | cabc.Mapping[str, typ.Any], *, source: str = "<input>"
) -> Resume:
    """Decode ``data`` (raw JSON or an already parsed mapping) into a Resume."""
    try:
        match data:
            case bytes() | str():
                return msgspec.json.decode(data, type=Resume)
            case cabc.Mapping():
                return msgspec.convert(dict(data), type=Resume)
            case _:
                msg = f"Unsupported resume payload type: {type(data).__name__}"
                raise ResumeDocumentError(msg)
    except msgspec.ValidationError as exc:
        msg = f"Resume document '{source}' is invalid: {exc}"
        raise ResumeDocumentError(msg) from exc
    except msgspec.DecodeError as exc:
        msg = f"Resume document '{source}' is not valid JSON: {exc}"
        raise ResumeDocumentError(msg) from exc


__all__ = ["load_resume", "parse_resume"]
