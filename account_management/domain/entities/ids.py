"""
Strongly typed identifiers

Each entity identifier is its own immutable type so a TenantId can never be
passed where a UserId is expected.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class TenantId:
    """Tenant identifier - the tenant's subdomain"""

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise TypeError(f"TenantId must be a str, got {type(self.value).__name__}")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class UserId:
    value: UUID

    def __post_init__(self):
        if not isinstance(self.value, UUID):
            raise TypeError(f"UserId must be a UUID, got {type(self.value).__name__}")

    @classmethod
    def new(cls) -> "UserId":
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str) -> "UserId":
        """Raises ValueError for malformed input"""
        return cls(UUID(raw))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class SignupId:
    value: UUID

    def __post_init__(self):
        if not isinstance(self.value, UUID):
            raise TypeError(f"SignupId must be a UUID, got {type(self.value).__name__}")

    @classmethod
    def new(cls) -> "SignupId":
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str) -> "SignupId":
        """Raises ValueError for malformed input"""
        return cls(UUID(raw))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class LoginId:
    value: UUID

    def __post_init__(self):
        if not isinstance(self.value, UUID):
            raise TypeError(f"LoginId must be a UUID, got {type(self.value).__name__}")

    @classmethod
    def new(cls) -> "LoginId":
        return cls(uuid4())

    @classmethod
    def parse(cls, raw: str) -> "LoginId":
        """Raises ValueError for malformed input"""
        return cls(UUID(raw))

    def __str__(self) -> str:
        return str(self.value)
