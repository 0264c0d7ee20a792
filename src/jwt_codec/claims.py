"""
Claim set assembled before encoding.
"""
from collections import UserDict
from datetime import datetime, timezone
from typing import Any, List, Optional, Union

Timestamp = Union[datetime, int, float]


def _to_timestamp(value: Timestamp) -> int:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(value.timestamp())
    return int(value)


class _TimeClaim:
    """Descriptor storing a registered time claim as integer Unix seconds."""

    def __init__(self, name: str):
        self.name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self
        value = instance.get(self.name)
        if value is None:
            return None
        return datetime.fromtimestamp(value, tz=timezone.utc)

    def __set__(self, instance, value: Optional[Timestamp]):
        if value is None:
            instance.pop(self.name, None)
        else:
            instance[self.name] = _to_timestamp(value)


class _Claim:
    """Descriptor exposing a registered claim by attribute name."""

    def __init__(self, name: str):
        self.name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return instance.get(self.name)

    def __set__(self, instance, value: Any):
        if value is None:
            instance.pop(self.name, None)
        else:
            instance[self.name] = value


class ClaimSet(UserDict):
    """
    A mutable mapping of claims with attributes for the registered names.

    Naive datetimes are treated as UTC. No claim is validated here.

        claims = ClaimSet({"role": "admin"})
        claims.issuer = "example-app"
        claims.expiration = datetime.now(timezone.utc) + timedelta(hours=1)
    """

    issuer = _Claim("iss")
    subject = _Claim("sub")
    jwt_id = _Claim("jti")
    expiration = _TimeClaim("exp")
    not_before = _TimeClaim("nbf")
    issued_at = _TimeClaim("iat")

    @property
    def audience(self) -> Optional[Union[str, List[str]]]:
        return self.get("aud")

    @audience.setter
    def audience(self, value: Optional[Union[str, List[str]]]):
        if value is None:
            self.pop("aud", None)
        elif isinstance(value, str):
            self["aud"] = value
        else:
            self["aud"] = list(value)

    @property
    def claims(self) -> dict:
        """A plain dict copy of the claims."""
        return dict(self.data)
