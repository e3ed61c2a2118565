# =============================================================================
# File: json_store.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from werkzeug.utils import secure_filename

from app.exceptions.custom_exceptions import StorageError
from app.logger import get_logger
from app.utils.log_sanitizer import sanitize_for_log


class JsonStore:
    """
    File-backed key/value store holding one JSON document per key.

    Keys are plain file names inside ``data_dir``. Failures never propagate:
    ``read`` returns None and ``write`` returns False, and the cause is logged.
    """

    def __init__(
        self, data_dir: Union[str, Path], logger: Optional[logging.Logger] = None
    ):
        self.data_dir = Path(data_dir)
        self.logger = logger or get_logger("json_store")

    def read(self, key: str) -> Optional[Any]:
        try:
            path = self._resolve(key)
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (StorageError, OSError, ValueError) as e:
            self.logger.error(f"Error reading {sanitize_for_log(key)}: {e}")
            return None

    def write(self, key: str, value: Any) -> bool:
        try:
            path = self._resolve(key)
            payload = json.dumps(value, indent=2)
            with open(path, "w", encoding="utf-8") as f:
                f.write(payload)
            return True
        except (StorageError, OSError, TypeError, ValueError) as e:
            self.logger.error(f"Error writing {sanitize_for_log(key)}: {e}")
            return False

    def _resolve(self, key: str) -> Path:
        if not key or not isinstance(key, str):
            raise StorageError("Store key must be a non-empty string")
        if secure_filename(key) != key:
            raise StorageError(f"Unsafe store key: {sanitize_for_log(key)}")

        base_dir = self.data_dir.resolve()
        path = (base_dir / key).resolve()
        try:
            path.relative_to(base_dir)
        except ValueError:
            raise StorageError(f"Store key escapes data directory: {sanitize_for_log(key)}")
        return path


_default_store: Optional[JsonStore] = None


def get_store() -> JsonStore:
    """Return the store rooted at the configured data directory."""
    global _default_store
    if _default_store is None:
        from app.app_init import APP_SETTINGS

        _default_store = JsonStore(APP_SETTINGS.storage.data_dir)
    return _default_store


def read_data(key: str) -> Optional[Any]:
    return get_store().read(key)


def write_data(key: str, value: Any) -> bool:
    return get_store().write(key, value)
