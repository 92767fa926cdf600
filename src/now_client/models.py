from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from now_client.core.errors import InvalidBodyError


class _Body(BaseModel):
    """Base for JSON request bodies; serialises with API field names."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    @classmethod
    def build(cls, **fields: Any):
        """Validate ``fields``; failures raise InvalidBodyError."""
        try:
            return cls(**fields)
        except ValidationError as exc:
            # loc/msg only; input values may be secrets
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in exc.errors()
            )
            raise InvalidBodyError(f"Invalid {cls.__name__} body: {problems}") from exc

    def to_body(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class DomainCreate(_Body):
    name: str
    # zeit.world serves DNS when external; otherwise point a CNAME at alias.zeit.co
    is_external_dns: bool = Field(default=False, alias="isExternal")


class CertificateRequest(_Body):
    domains: List[str]
    renew: Optional[bool] = None

    @classmethod
    def for_cn(cls, cn: str, *, renew: bool = False) -> "CertificateRequest":
        return cls.build(domains=[cn], renew=True if renew else None)


class CertificateReplacement(_Body):
    domains: List[str]
    ca: str = ""
    cert: str
    key: str


class AliasCreate(_Body):
    alias: str


class SecretCreate(_Body):
    name: str
    value: str


class SecretRename(_Body):
    name: str


__all__ = [
    "DomainCreate",
    "CertificateRequest",
    "CertificateReplacement",
    "AliasCreate",
    "SecretCreate",
    "SecretRename",
]
