"""
Loaders for the structured inputs that constraints compare.

Each loader either returns the parsed structure or raises
MalformedInputError. Parse errors are never reported as ordinary
assertion mismatches.
"""

from __future__ import annotations

import json
import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any

from .exceptions import MalformedInputError

logger = logging.getLogger(__name__)


def load_text_file(path: str | Path) -> str:
    """
    Read a text file.

    Args:
        path: File to read

    Returns:
        The file contents

    Raises:
        MalformedInputError: If the file does not exist or cannot be read
    """
    path = Path(path)

    if not path.exists():
        raise MalformedInputError(f'File "{path}" does not exist', source=str(path))

    try:
        return path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Failed to read {path}: {e}")
        raise MalformedInputError(f'Cannot read "{path}": {e}', source=str(path)) from e


def load_json(text: str, source: str = "string") -> Any:
    """
    Parse a JSON document.

    Args:
        text: The JSON text
        source: Where the text came from, used in error messages

    Returns:
        The decoded value

    Raises:
        MalformedInputError: If text is not a string or not valid JSON
    """
    if not isinstance(text, (str, bytes, bytearray)):
        raise MalformedInputError(
            f"JSON input must be a string, got {type(text).__name__}",
            source=source,
        )

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug(f"Invalid JSON from {source}: {e}")
        raise MalformedInputError(f"Invalid JSON ({source}): {e.msg} at line {e.lineno} column {e.colno}", source=source) from e
    except UnicodeDecodeError as e:
        logger.debug(f"Undecodable JSON from {source}: {e}")
        raise MalformedInputError(f"Invalid JSON ({source}): cannot decode {e.encoding} input", source=source) from e


def load_json_file(path: str | Path) -> Any:
    """Read and parse a JSON file."""
    return load_json(load_text_file(path), source=str(path))


def load_xml(text: str, source: str = "string") -> ET.Element:
    """
    Parse an XML document.

    Args:
        text: The XML text
        source: Where the text came from, used in error messages

    Returns:
        The root element

    Raises:
        MalformedInputError: If text is empty or not well-formed XML
    """
    if not isinstance(text, (str, bytes)) or not text.strip():
        raise MalformedInputError(f"Could not load XML from {'empty string' if text == '' else source}", source=source)

    try:
        return ET.fromstring(text)
    except ET.ParseError as e:
        logger.debug(f"Invalid XML from {source}: {e}")
        raise MalformedInputError(f"Invalid XML ({source}): {e}", source=source) from e


def load_xml_file(path: str | Path) -> ET.Element:
    """Read and parse an XML file."""
    return load_xml(load_text_file(path), source=str(path))


def canonicalize_xml(text: str, source: str = "string") -> str:
    """
    Return the C14N form of an XML document with insignificant whitespace removed.

    Raises:
        MalformedInputError: If the document is not well-formed
    """
    load_xml(text, source)
    try:
        return ET.canonicalize(text, strip_text=True)
    except ET.ParseError as e:
        raise MalformedInputError(f"Invalid XML ({source}): {e}", source=source) from e
