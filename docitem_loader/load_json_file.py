"""Logic for loading JSON documents from disk."""

import json
from pathlib import Path
from typing import Any


def load_json_file(path: Path) -> Any:
    """Read a JSON file and parse it.

    The file is read completely before parsing, so the handle is released even
    when the content is malformed. ``json.JSONDecodeError`` is not caught.
    """
    text = path.read_text(encoding="utf-8")
    return json.loads(text)
