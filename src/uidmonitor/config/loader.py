"""
Reads config.toml into plain dictionaries; validation happens in validators.py.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict

from ..validation import handle_config_error, ErrorSeverity

logger = logging.getLogger(__name__)


def load_toml_file(file_path: Path, description: str = "uid monitor configuration") -> Dict[str, Any]:
    """
    Parse a TOML file.

    Args:
        file_path: File to read
        description: Used in log and error messages

    Returns:
        The parsed document; the `monitor` table may be absent

    Raises:
        FileNotFoundError: If there is no file at `file_path`
        tomllib.TOMLDecodeError: If the document is not valid TOML
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"{description} not found: {path}")

    logger.info(f"Reading {description} from {path}")
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        handle_config_error(
            error=e,
            context=f"parsing {path.name}",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise
