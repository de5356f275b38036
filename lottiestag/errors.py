"""
Decode errors.

Every failure of a decode is reported as a single DecodeError describing the
first violation found. The kind tells callers which family of problem it was:

- PARSE: the input is not well-formed JSON
- SCHEMA: a required key is missing or has the wrong shape
- UNKNOWN_DISCRIMINANT: a shape tag or enumerated option is outside its set
- MALFORMED_KEYFRAMES: an animated property has no usable keyframes
"""

from enum import Enum
from typing import Any

from pydantic import ValidationError


class DecodeErrorKind(str, Enum):
    """Families of decode failures."""
    PARSE = "parse"
    SCHEMA = "schema"
    UNKNOWN_DISCRIMINANT = "unknown_discriminant"
    MALFORMED_KEYFRAMES = "malformed_keyframes"


# pydantic error types that map to something more specific than SCHEMA
_KIND_BY_ERROR_TYPE: dict[str, DecodeErrorKind] = {
    'json_invalid': DecodeErrorKind.PARSE,
    'json_type': DecodeErrorKind.PARSE,
    'union_tag_invalid': DecodeErrorKind.UNKNOWN_DISCRIMINANT,
    'enum': DecodeErrorKind.UNKNOWN_DISCRIMINANT,
    'malformed_keyframes': DecodeErrorKind.MALFORMED_KEYFRAMES,
}

# Model fields that hold a record's own keys, each followed by its union tag
_WRAPPER_FIELDS = frozenset({'content', 'shape'})
# Arrays whose items are tagged unions, the tag follows the index
_TAGGED_ARRAYS = frozenset({'assets'})


def source_location(loc: tuple[Any, ...]) -> tuple[Any, ...]:
    """
    Map a pydantic error location to a path into the source data.

    Wrapper fields and union tags have no counterpart in the source and are
    dropped, e.g. ('layers', 0, 'content', 'shape', 'shapes', 0, 'shape', 'rc', 'r')
    becomes ('layers', 0, 'shapes', 0, 'r').
    """
    path: list[Any] = []
    parts = list(loc)
    index = 0
    while index < len(parts):
        part = parts[index]
        index += 1
        if part in _WRAPPER_FIELDS:
            if index < len(parts) and isinstance(parts[index], str):
                index += 1
            continue
        path.append(part)
        if (
            part in _TAGGED_ARRAYS
            and index + 1 < len(parts)
            and isinstance(parts[index], int)
            and isinstance(parts[index + 1], str)
        ):
            path.append(parts[index])
            index += 2
    return tuple(path)


class DecodeError(ValueError):
    """
    Raised when a document (or a part of one) cannot be decoded.

    :param kind: The failure family
    :param message: Human readable description
    :param location: Path into the source data, e.g. ('layers', 0, 'ks')
    """

    def __init__(
        self,
        kind: DecodeErrorKind,
        message: str,
        location: tuple[Any, ...] = (),
    ):
        self.kind = kind
        self.message = message
        self.location = tuple(location)
        super().__init__(self._format())

    def _format(self) -> str:
        if not self.location:
            return f"{self.kind.value}: {self.message}"
        path = ".".join(str(part) for part in self.location)
        return f"{self.kind.value} at {path}: {self.message}"

    def with_prefix(self, *prefix: Any) -> 'DecodeError':
        """Return a copy located below the given path prefix."""
        return DecodeError(self.kind, self.message, (*prefix, *self.location))

    @classmethod
    def from_validation_error(
        cls, error: ValidationError, prefix: tuple[Any, ...] = ()
    ) -> 'DecodeError':
        """
        Translate a pydantic ValidationError into a DecodeError.

        Only the first reported error is kept, the decode is terminal anyway.
        """
        details = error.errors()
        if not details:
            return cls(DecodeErrorKind.SCHEMA, str(error), prefix)
        first = details[0]
        kind = _KIND_BY_ERROR_TYPE.get(first['type'], DecodeErrorKind.SCHEMA)
        return cls(kind, first['msg'], (*prefix, *source_location(first['loc'])))
