from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Availability(str, Enum):
    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    FAILED = "failed"


class LookupOutcome(BaseModel):
    """Verdict of a single availability lookup. ``reason`` is only set when the lookup failed."""

    model_config = ConfigDict(frozen=True)

    status: Availability
    reason: Optional[str] = None

    @classmethod
    def available(cls) -> LookupOutcome:
        return cls(status=Availability.AVAILABLE)

    @classmethod
    def unavailable(cls) -> LookupOutcome:
        return cls(status=Availability.UNAVAILABLE)

    @classmethod
    def failed(cls, reason: str) -> LookupOutcome:
        return cls(status=Availability.FAILED, reason=reason)

    @property
    def is_failed(self) -> bool:
        return self.status is Availability.FAILED


class DomainResult(BaseModel):
    available: bool
    error: Optional[str] = None

    @classmethod
    def from_outcome(cls, outcome: LookupOutcome) -> DomainResult:
        if outcome.is_failed:
            return cls(available=False, error=outcome.reason)
        return cls(available=outcome.status is Availability.AVAILABLE)


class BatchReport(BaseModel):
    results: Dict[str, DomainResult] = Field(default_factory=dict)

    @property
    def has_errors(self) -> bool:
        return any(result.error is not None for result in self.results.values())

    @property
    def available_domains(self) -> List[str]:
        return [domain for domain, result in self.results.items() if result.available]


class DnsAnswer(BaseModel):
    """Answer record; only its presence matters, so every field is optional."""

    model_config = ConfigDict(extra="ignore")

    name: Optional[str] = None
    type: Optional[int] = None
    TTL: Optional[int] = None
    data: Optional[str] = None


class DnsJsonResponse(BaseModel):
    """Subset of the JSON body returned by a DNS-over-HTTPS resolver."""

    model_config = ConfigDict(extra="ignore")

    Status: int
    Answer: Optional[List[DnsAnswer]] = None


class CheckResponse(BaseModel):
    status: str
    results: Dict[str, DomainResult]
    message: str


class ErrorResponse(BaseModel):
    status: str = "error"
    error: str
