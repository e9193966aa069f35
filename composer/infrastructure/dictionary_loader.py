"""Loading dictionaries from local CSV and JSON files."""

import csv
import io
import json
import logging
from pathlib import Path
from typing import Any, Iterable, Tuple, Union
from pydantic import ValidationError
from shared.domain.models import DictionaryEntry, DictionaryRecord
from shared.domain.errors import InvalidDictionary
from shared.domain.consts import DictionaryFormat, DictionaryFields

logger = logging.getLogger(__name__)


def detect_format(name: str) -> DictionaryFormat:
    """
    Detect dictionary format from a file name or URL path suffix.
    
    Raises:
        InvalidDictionary: If the suffix is not .csv or .json
    """
    suffix = Path(name).suffix.lower().lstrip(".")
    try:
        return DictionaryFormat(suffix)
    except ValueError:
        raise InvalidDictionary(f"Unsupported dictionary format: {name}")


def load_dictionary_file(path: Union[str, Path]) -> Tuple[DictionaryEntry, ...]:
    """
    Load and validate a dictionary from a .csv or .json file.
    
    Returns:
        Tuple of DictionaryEntry in file order.
        
    Raises:
        InvalidDictionary: If the file is missing, unreadable, in an unsupported
            format, or contains an invalid record.
    """
    path = Path(path)
    fmt = detect_format(path.name)
    
    try:
        # utf-8-sig tolerates the BOM spreadsheet exports put in front of CSV headers
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        raise InvalidDictionary(f"Dictionary file not found: {path}")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidDictionary(f"Error reading dictionary file {path}: {e}") from e
    
    logger.info(f"Loading {fmt.value} dictionary from {path}")
    return parse_dictionary(text, fmt)


def parse_dictionary(text: str, fmt: DictionaryFormat) -> Tuple[DictionaryEntry, ...]:
    """
    Parse dictionary text in the given format.
    
    Rows with a blank word are skipped with a warning; any other invalid
    row fails the whole dictionary.
    
    Returns:
        Tuple of DictionaryEntry in source order.
    """
    # Text decoded without utf-8-sig (e.g. HTTP bodies) may still start with a BOM
    text = text.removeprefix("\ufeff")
    
    if fmt == DictionaryFormat.CSV:
        rows = _csv_rows(text)
    else:
        rows = _json_rows(text)
    
    entries = []
    skipped = 0
    for row_num, row in enumerate(rows, 1):
        if not isinstance(row, dict):
            raise InvalidDictionary(f"Row {row_num}: expected an object, got {type(row).__name__}")
        
        if not str(row.get(DictionaryFields.WORD) or "").strip():
            logger.warning(f"Row {row_num}: Skipping record with blank word")
            skipped += 1
            continue
        
        try:
            record = DictionaryRecord.model_validate(row)
        except ValidationError as e:
            raise InvalidDictionary(f"Row {row_num}: Invalid dictionary record: {e}") from e
        entries.append(record.to_entry())
    
    logger.info(f"Loaded {len(entries)} dictionary entries ({skipped} skipped)")
    return tuple(entries)


def _csv_rows(text: str) -> Iterable[Any]:
    reader = csv.DictReader(io.StringIO(text))
    fieldnames = [name.strip() for name in (reader.fieldnames or [])]
    missing = {DictionaryFields.WORD, DictionaryFields.STRING_LENGTH} - set(fieldnames)
    if missing:
        raise InvalidDictionary(f"CSV header is missing columns: {', '.join(sorted(missing))}")
    reader.fieldnames = fieldnames
    return list(reader)


def _json_rows(text: str) -> Iterable[Any]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidDictionary(f"Invalid JSON dictionary: {e}") from e
    
    if not isinstance(data, list):
        raise InvalidDictionary("JSON dictionary must be an array of records")
    return data
