from dataclasses import dataclass, field
from datetime import datetime, timedelta
from decimal import Decimal
from enum import Enum

SUPPORTED_CURRENCIES: frozenset[str] = frozenset({
    "USD", "EUR", "GBP", "INR", "JPY", "AUD", "CAD", "SGD", "CHF",
    "CNY", "AED", "NZD", "ZAR", "SEK", "NOK", "DKK", "HKD", "KRW",
    "THB", "MYR", "PHP", "IDR", "BRL", "RUB", "PLN", "MXN", "TWD",
})

CACHE_SOURCE = "cache"

RateTable = dict[str, Decimal]


@dataclass(frozen=True)
class ConversionRequest:
    amount: Decimal
    base: str
    targets: tuple[str, ...]


class ProviderFailureReason(str, Enum):
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"
    EMPTY_INTERSECTION = "empty_intersection"


@dataclass(frozen=True)
class RateFetchResult:
    """Outcome of a single provider attempt: either a rate table or a failure reason."""
    provider_name: str
    rates: RateTable | None = None
    failure: ProviderFailureReason | None = None
    error_message: str | None = None

    @property
    def was_successful(self) -> bool:
        return self.failure is None and bool(self.rates)

    @classmethod
    def success(cls, provider_name: str, rates: RateTable) -> "RateFetchResult":
        return cls(provider_name=provider_name, rates=rates)

    @classmethod
    def failed(
        cls, provider_name: str, failure: ProviderFailureReason, error_message: str
    ) -> "RateFetchResult":
        return cls(provider_name=provider_name, failure=failure, error_message=error_message)


@dataclass(frozen=True)
class CacheEntry:
    key: str
    timestamp: datetime
    rates: RateTable = field(default_factory=dict)

    def age(self, now: datetime) -> timedelta:
        return now - self.timestamp

    def is_fresh(self, now: datetime, ttl: timedelta) -> bool:
        return self.age(now) < ttl


@dataclass(frozen=True)
class RateLookup:
    """Rate table chosen for a request and where it came from."""
    rates: RateTable
    source: str
    cached_at: datetime | None = None


@dataclass(frozen=True)
class ConversionResult:
    base: str
    amount: Decimal
    conversions: dict[str, Decimal]
    source: str
    cached_at: datetime | None = None
