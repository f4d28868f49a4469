import json
import logging
from dataclasses import MISSING, asdict, fields, is_dataclass
from typing import Any, TypeVar

from objkit.errors import ParseError, SerializationError, ShapeMismatchError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def serialize(value: Any) -> str:
    """Return the compact JSON text of ``value``.

    Dataclass instances are encoded as their fields; methods are behaviour,
    not data, and never appear in the output.
    """
    try:
        return json.dumps(
            value,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
            default=_encode_dataclass,
        )
    except (TypeError, ValueError) as error:
        raise SerializationError(f"Cannot serialize {type(value).__name__}", cause=error) from error


def deserialize(capability: type[T], text: str | bytes) -> T:
    """Parse ``text`` and build a ``capability`` instance from its fields."""
    fields_by_name = _capability_fields(capability)

    try:
        payload = json.loads(text)
    except (ValueError, RecursionError) as error:
        logger.debug("Failed to parse %s payload: %s", capability.__name__, error)
        raise ParseError(f"Invalid JSON: {error}", cause=error) from error

    if not isinstance(payload, dict):
        raise ShapeMismatchError(
            f"Expected a JSON object for {capability.__name__}, got {type(payload).__name__}"
        )

    required = [
        name
        for name, item in fields_by_name.items()
        if item.init and item.default is MISSING and item.default_factory is MISSING
    ]
    missing = [name for name in required if name not in payload]
    unexpected = [key for key in payload if key not in fields_by_name]
    if missing or unexpected:
        logger.debug(
            "Shape mismatch for %s: missing=%s unexpected=%s",
            capability.__name__,
            missing,
            unexpected,
        )
        raise ShapeMismatchError(
            f"Payload does not match {capability.__name__}",
            missing=missing,
            unexpected=unexpected,
        )

    return capability(**payload)


def capability_fields(capability: type) -> list[str]:
    """Attribute names a capability set expects, in declaration order."""
    return list(_capability_fields(capability))


def _capability_fields(capability: type) -> dict[str, Any]:
    if not (isinstance(capability, type) and is_dataclass(capability)):
        raise TypeError(f"Capability set must be a dataclass type, got {capability!r}")
    return {item.name: item for item in fields(capability) if item.init}


def _encode_dataclass(value: Any) -> Any:
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")
