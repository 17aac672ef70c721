"""Entry identifier generation and compact URL-safe encoding.

Entry identifiers are random 128-bit UUIDs rendered as unpadded URL-safe
base64 (22 characters) behind the `FXQL-` prefix.
"""

from __future__ import annotations

import base64
from collections.abc import Callable
from uuid import UUID, uuid4

ENTRY_ID_PREFIX = "FXQL-"

IdentifierSource = Callable[[], UUID]
"""Zero-argument callable returning a fresh 128-bit identifier."""


def domain_fxql_encode_identifier(value: UUID) -> str:
    """Encode one UUID as unpadded URL-safe base64 text.

    Args:
        value: Identifier to encode.

    Returns:
        str: 22-character URL-safe text.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return base64.urlsafe_b64encode(value.bytes).rstrip(b"=").decode("ascii")


def domain_fxql_decode_identifier(encoded_value: str) -> UUID:
    """Decode text produced by `domain_fxql_encode_identifier`.

    Args:
        encoded_value: Unprefixed encoded identifier.

    Returns:
        UUID: Original identifier.

    Raises:
        ValueError: Raised when text does not decode to 16 bytes.
    """

    padding = "=" * (-len(encoded_value) % 4)
    return UUID(bytes=base64.urlsafe_b64decode(encoded_value + padding))


def domain_fxql_build_entry_id(identifier_source: IdentifierSource | None = None) -> str:
    """Generate one fresh prefixed entry identifier.

    Args:
        identifier_source: Optional generator override; defaults to `uuid4`.

    Returns:
        str: Entry identifier such as `FXQL-3q2-7wAAQ...`.

    Raises:
        RuntimeError: Raised when the generator fails.
    """

    generate = identifier_source or uuid4
    return f"{ENTRY_ID_PREFIX}{domain_fxql_encode_identifier(generate())}"


def domain_fxql_parse_entry_id(entry_id: str) -> UUID:
    """Recover the UUID behind one prefixed entry identifier.

    Args:
        entry_id: Entry identifier with or without the `FXQL-` prefix.

    Returns:
        UUID: Original identifier.

    Raises:
        ValueError: Raised when text does not decode to 16 bytes.
    """

    normalized_entry_id = entry_id.strip()
    if normalized_entry_id.startswith(ENTRY_ID_PREFIX):
        normalized_entry_id = normalized_entry_id[len(ENTRY_ID_PREFIX) :]
    return domain_fxql_decode_identifier(normalized_entry_id)
