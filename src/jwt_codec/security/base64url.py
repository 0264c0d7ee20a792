"""
Unpadded URL-safe base64 helpers used for token framing.
"""
import base64
import binascii
import re
from typing import Union

from .exceptions import MalformedTokenError

_SEGMENT_PATTERN = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data: bytes) -> str:
    """Base64url encode without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(segment: Union[str, bytes]) -> bytes:
    """
    Strictly decode an unpadded base64url segment.

    Args:
        segment: The encoded segment

    Returns:
        The decoded bytes

    Raises:
        MalformedTokenError: If the segment contains characters outside the
            URL-safe alphabet, carries padding, or has an impossible length
    """
    if isinstance(segment, bytes):
        try:
            segment = segment.decode("ascii")
        except UnicodeDecodeError as e:
            raise MalformedTokenError("Segment is not ASCII") from e

    if not _SEGMENT_PATTERN.fullmatch(segment):
        raise MalformedTokenError("Segment contains invalid base64url characters")
    if len(segment) % 4 == 1:
        raise MalformedTokenError("Segment has invalid base64url length")

    padding = "=" * (-len(segment) % 4)
    try:
        data = base64.urlsafe_b64decode(segment + padding)
    except (binascii.Error, ValueError) as e:
        raise MalformedTokenError("Segment is not valid base64url") from e

    # Reject non-canonical trailing bits so each byte string has one encoding
    if b64url_encode(data) != segment:
        raise MalformedTokenError("Segment is not canonical base64url")
    return data
