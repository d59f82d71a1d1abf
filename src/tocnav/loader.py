"""Load and validate raw TOC datasets."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from tocnav.exceptions import InvalidTOCDataError
from tocnav.schemas import TOCData


def parse_toc_data(raw: Mapping[str, Any] | str | bytes) -> TOCData:
    """Validate a raw dataset into a TOCData model.

    Only the shape is checked. Dangling page references are left for
    ``build_tree`` to surface.

    Args:
        raw: A decoded JSON object, or JSON text.

    Returns:
        The validated dataset.

    Raises:
        InvalidTOCDataError: If the input is not valid JSON or does not match
            the dataset shape.
    """
    try:
        if isinstance(raw, (str, bytes)):
            return TOCData.model_validate_json(raw)
        return TOCData.model_validate(raw)
    except ValidationError as exc:
        raise InvalidTOCDataError(f"Invalid TOC data: {exc}") from exc


def load_toc_file(path: Path | str) -> TOCData:
    """Read and validate a TOC dataset from a UTF-8 JSON file.

    Raises:
        FileNotFoundError: If the file does not exist.
        InvalidTOCDataError: If the content is not a valid dataset.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"TOC file not found: {path}")
    return parse_toc_data(path.read_text(encoding="utf-8"))


def dump_toc_data(data: TOCData) -> dict[str, Any]:
    """Serialize a dataset back to its camelCase wire shape."""
    return data.model_dump(mode="json", by_alias=True, exclude_none=True)
