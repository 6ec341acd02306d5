from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import JsonValue, RootModel, TypeAdapter

from checkout_connector.core.errors import DocumentKeyError, MalformedResponseError

_VALUE_ADAPTER: TypeAdapter[JsonValue] = TypeAdapter(JsonValue)
_MAPPING_ADAPTER: TypeAdapter[dict[str, JsonValue]] = TypeAdapter(dict[str, JsonValue])


class Document(RootModel[dict[str, JsonValue]]):
    """Opaque keyed state of a remote resource.

    Values are restricted to what survives a JSON round trip: strings,
    numbers, booleans, ``None``, lists and nested string-keyed mappings.
    The business schema is owned by the remote API and is never validated
    here.
    """

    def __init__(self, root: Mapping[str, Any] | None = None) -> None:
        super().__init__(dict(root) if root is not None else {})

    # ------------------------------------------------------------------
    # Keyed access
    # ------------------------------------------------------------------

    def get_value(self, key: str) -> JsonValue:
        """Return the value stored under *key*.

        Raises:
            DocumentKeyError: if *key* is not present.
        """
        try:
            return self.root[key]
        except KeyError:
            raise DocumentKeyError(key) from None

    def set_value(self, key: str, value: Any) -> None:
        """Insert *key* or overwrite its current value."""
        self.root[key] = _VALUE_ADAPTER.validate_python(value)

    def keys(self) -> list[str]:
        return list(self.root)

    def to_dict(self) -> dict[str, JsonValue]:
        """Return a deep copy of the underlying mapping."""
        return self.model_dump()

    def __getitem__(self, key: str) -> JsonValue:
        return self.get_value(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_value(key, value)

    def __contains__(self, key: object) -> bool:
        return key in self.root

    def __len__(self) -> int:
        return len(self.root)

    # ------------------------------------------------------------------
    # Wire format
    # ------------------------------------------------------------------

    def encode(self) -> bytes:
        """Serialize to compact UTF-8 JSON."""
        return self.model_dump_json().encode("utf-8")

    @classmethod
    def decode(cls, body: bytes) -> Document:
        """Parse a JSON object body into a new ``Document``.

        Raises:
            MalformedResponseError: if *body* is not a JSON object.
        """
        try:
            parsed = _MAPPING_ADAPTER.validate_json(body)
        except ValueError as exc:  # ValidationError and UnicodeDecodeError alike
            raise MalformedResponseError("Bad format on response content.") from exc
        return cls(parsed)
