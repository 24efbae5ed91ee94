"""IO utilities for reading telemetry files and persisting results."""

import hashlib
import json
from pathlib import Path
from typing import Any, Dict

import orjson


def ensure_dir(path: str | Path) -> Path:
    """Ensure directory exists, create if needed.

    Args:
        path: Directory path

    Returns:
        Path object
    """
    path_obj = Path(path)
    path_obj.mkdir(parents=True, exist_ok=True)
    return path_obj


def compute_text_hash(text: str, algorithm: str = "sha256") -> str:
    """Compute hash of a text blob (UTF-8 encoded).

    Args:
        text: Input text
        algorithm: Hash algorithm ('sha256', 'md5', etc.)

    Returns:
        Hex digest
    """
    hasher = hashlib.new(algorithm)
    hasher.update(text.encode("utf-8"))
    return hasher.hexdigest()


def read_text(file_path: str | Path) -> str:
    """Read a UTF-8 text file.

    Raises:
        FileNotFoundError: If the file does not exist
    """
    path_obj = Path(file_path)
    if not path_obj.exists():
        raise FileNotFoundError(f"Telemetry file not found: {path_obj}")

    # utf-8-sig strips a BOM some loggers write before the header row
    return path_obj.read_text(encoding="utf-8-sig")


def save_json(data: Dict[str, Any], file_path: str | Path, pretty: bool = True) -> None:
    """Save data as JSON file.

    Args:
        data: Data to save
        file_path: Output file path
        pretty: Whether to pretty-print (indent)
    """
    path_obj = Path(file_path)
    ensure_dir(path_obj.parent)

    if pretty:
        with open(path_obj, "w") as f:
            json.dump(data, f, indent=2, default=str)
    else:
        with open(path_obj, "wb") as f:
            f.write(orjson.dumps(data, option=orjson.OPT_SERIALIZE_NUMPY))


def load_json(file_path: str | Path) -> Dict[str, Any]:
    """Load JSON file.

    Args:
        file_path: Path to JSON file

    Returns:
        Loaded data
    """
    with open(file_path, "rb") as f:
        return orjson.loads(f.read())
