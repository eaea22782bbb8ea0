"""Resolution of the two identifier forms a record can be addressed by."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from bson import ObjectId

_OPAQUE_ID_PATTERN = re.compile(r"^[A-Za-z0-9_.:\-]{1,64}$")


class InvalidIdentifierError(ValueError):
    """Raised when a value cannot be used to address a record."""


@dataclass(frozen=True)
class NativeId:
    """Database-native object identifier."""

    value: ObjectId

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OpaqueId:
    """Application-level string identifier stored in the ``id`` field."""

    value: str

    def __str__(self) -> str:
        return self.value


Identifier = Union[NativeId, OpaqueId]


def resolve_identifier(raw: object) -> Identifier:
    """Classify ``raw`` as a native or an application identifier.

    A structurally valid 24-character hex string always resolves to
    :class:`NativeId`; lookups never fall back to the ``id`` field for it.
    """

    if isinstance(raw, (NativeId, OpaqueId)):
        return raw
    if isinstance(raw, ObjectId):
        return NativeId(raw)
    if raw is None:
        raise InvalidIdentifierError("Record identifier is required")

    text = str(raw).strip()
    if not text:
        raise InvalidIdentifierError("Record identifier is required")
    if ObjectId.is_valid(text):
        return NativeId(ObjectId(text))
    if not _OPAQUE_ID_PATTERN.match(text):
        raise InvalidIdentifierError(f"Invalid record identifier format: {text!r}")
    return OpaqueId(text)
