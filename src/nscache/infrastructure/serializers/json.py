"""JSON serializer implementation."""

import json
from collections.abc import Callable
from datetime import date, datetime
from typing import Any


class SerializationError(Exception):
    """Raised when serialization or deserialization fails."""

    pass


class JsonSerializer:
    """JSON serializer for namespace records.

    Dates and datetimes are written as tagged objects and restored on
    read. Sets come back as lists. Other objects with a ``__dict__`` are
    written as their attributes and come back as plain dicts; pass
    ``default`` and ``object_hook`` to round-trip them. ``default`` is
    called for objects JSON cannot encode, ``object_hook`` for every
    decoded JSON object.
    """

    def __init__(
        self,
        encoding: str = "utf-8",
        default: Callable[[Any], Any] | None = None,
        object_hook: Callable[[dict[str, Any]], Any] | None = None,
    ) -> None:
        """Initialize the JSON serializer.

        Args:
            encoding: Character encoding to use.
            default: Encoder for values JSON does not support. Tried
                before the built-in date handling.
            object_hook: Decoder applied to every decoded object after
                the built-in date handling.
        """
        self._encoding = encoding
        self._default = default
        self._object_hook = object_hook

    def serialize(self, value: Any) -> bytes:
        """Serialize value to bytes.

        Args:
            value: The Python object to serialize.

        Returns:
            The serialized value as bytes.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        try:
            json_str = json.dumps(value, default=self._default_encoder)
            return json_str.encode(self._encoding)
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: bytes | str) -> Any:
        """Deserialize stored data to a value.

        Args:
            data: The bytes or text to deserialize.

        Returns:
            The deserialized Python object.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            json_str = data.decode(self._encoding) if isinstance(data, bytes) else data
            return json.loads(json_str, object_hook=self._object_decoder)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError, ValueError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

    def _default_encoder(self, obj: Any) -> Any:
        """Custom encoder for non-JSON-serializable types.

        Args:
            obj: The object to encode.

        Returns:
            A JSON-serializable representation of the object.

        Raises:
            TypeError: If the object cannot be encoded.
        """
        if self._default is not None:
            try:
                return self._default(obj)
            except TypeError:
                pass
        if isinstance(obj, datetime):
            return {"__datetime__": obj.isoformat()}
        if isinstance(obj, date):
            return {"__date__": obj.isoformat()}
        if isinstance(obj, (set, frozenset)):
            return sorted(obj, key=repr)
        if hasattr(obj, "__dict__"):
            return obj.__dict__
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")

    def _object_decoder(self, obj: dict[str, Any]) -> Any:
        if len(obj) == 1:
            if "__datetime__" in obj:
                return datetime.fromisoformat(obj["__datetime__"])
            if "__date__" in obj:
                return date.fromisoformat(obj["__date__"])
        if self._object_hook is not None:
            return self._object_hook(obj)
        return obj
