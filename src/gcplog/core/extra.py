"""Process-wide supplemental fields merged into every emitted record."""

import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any


class ExtraFields:
    """Shared key/value store rendered as the ``extra`` object of each record.

    Readers never lock: ``merge`` builds a new mapping under a lock and swaps
    the reference, so ``snapshot`` always returns a complete, immutable view.

    Example:
        ```python
        fields = ExtraFields()
        fields.merge({"env": "prod"})
        handler = GCPHandler(writer, extra_fields=fields)
        ```
    """

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._lock = threading.Lock()
        self._fields: Mapping[str, Any] = MappingProxyType(dict(initial or {}))

    def merge(self, fields: Mapping[str, Any] | None = None, **kwargs: Any) -> None:
        """Union fields into the store. Later merges overwrite the same keys.

        Args:
            fields: Mapping of fields to merge.
            **kwargs: Additional fields, applied after ``fields``.
        """
        with self._lock:
            merged = dict(self._fields)
            if fields:
                merged.update(fields)
            merged.update(kwargs)
            self._fields = MappingProxyType(merged)

    def snapshot(self) -> Mapping[str, Any]:
        """Return the current contents as a read-only mapping."""
        return self._fields

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"ExtraFields({dict(self._fields)!r})"


_default = ExtraFields()


def default_extra_fields() -> ExtraFields:
    """Return the process default store used when none is injected."""
    return _default
