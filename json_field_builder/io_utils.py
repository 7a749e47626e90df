from __future__ import annotations

import json
import logging
import os
import tempfile
from typing import Any, Optional

from .errors import ExportError

logger = logging.getLogger(__name__)

DEFAULT_EXPORT_NAME = "schema.json"


def dump_document(document: Any) -> str:
    """Serialize a generated document with 2-space indentation."""
    return json.dumps(document, indent=2, ensure_ascii=False)


def export_document(document: Any, file_name: Optional[str] = DEFAULT_EXPORT_NAME, directory: Optional[str] = None) -> str:
    """Write the document to ``directory`` (the temp dir by default) and return its path."""
    if not file_name or not file_name.strip():
        file_name = DEFAULT_EXPORT_NAME
    file_name = os.path.basename(file_name.strip())
    if not file_name.lower().endswith('.json'):
        file_name += '.json'

    target_dir = directory or tempfile.gettempdir()
    path = os.path.join(target_dir, file_name)

    try:
        os.makedirs(target_dir, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(dump_document(document))
    except OSError as e:
        raise ExportError(f"Error writing {path}: {e}") from e

    logger.info("Exported generated document to %s", path)
    return path
