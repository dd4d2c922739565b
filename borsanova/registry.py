"""Name keyed registries and the market session that owns them."""
from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, Callable, Dict, Generic, Iterator, Optional, TypeVar

from .company import Company
from .exceptions import InvalidArgumentError
from .exchange import Exchange
from .identity import NamedEntity, validate_name
from .operators import Operator
from .policies import PricePolicy, create_price_policy, default_price_policy
from .share import Share

if TYPE_CHECKING:
    from .config import Settings

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=NamedEntity)


class Registry(Generic[E]):
    """Returns one canonical instance per name, creating it on first request.

    Registries only grow: entities are never evicted.
    """

    def __init__(self, kind: str, factory: Callable[[str], E]) -> None:
        self._kind = kind
        self._factory = factory
        self._entities: Dict[str, E] = {}
        self._lock = threading.Lock()

    def of(self, name: str) -> E:
        validate_name(name, self._kind)
        with self._lock:
            entity = self._entities.get(name)
            if entity is None:
                entity = self._factory(name)
                self._entities[name] = entity
                logger.debug("Registered %s %r", self._kind, name)
            return entity

    def get(self, name: str) -> Optional[E]:
        with self._lock:
            return self._entities.get(name)

    def owns(self, entity: E) -> bool:
        """True when ``entity`` is the very instance this registry hands out for its name."""

        with self._lock:
            return self._entities.get(entity.name) is entity

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._entities

    def __iter__(self) -> Iterator[E]:
        with self._lock:
            entities = sorted(self._entities.values())
        return iter(entities)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)


class Market:
    """Session context holding the company, exchange and operator registries.

    Every simulation gets its own market; nothing is shared between markets.
    """

    def __init__(self, policy_factory: Optional[Callable[[], PricePolicy]] = None) -> None:
        self._policy_factory = policy_factory or default_price_policy
        self.companies: Registry[Company] = Registry("company", Company)
        self.exchanges: Registry[Exchange] = Registry("exchange", self._new_exchange)
        self.operators: Registry[Operator] = Registry("operator", Operator)

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Market":
        """Market whose new exchanges start with the configured price policy."""

        kind, step = settings.price_policy, settings.price_step
        create_price_policy(kind, step)
        return cls(policy_factory=lambda: create_price_policy(kind, step))

    def _new_exchange(self, name: str) -> Exchange:
        return Exchange(name, price_policy=self._policy_factory())

    def company(self, name: str) -> Company:
        return self.companies.of(name)

    def exchange(self, name: str) -> Exchange:
        return self.exchanges.of(name)

    def operator(self, name: str) -> Operator:
        return self.operators.of(name)

    def share(self, company: Company, exchange: Exchange) -> Share:
        """Share view of ``company`` on ``exchange``, resolved through this market."""

        if company is None or exchange is None:
            raise TypeError("Share requires both a company and an exchange")
        if not (self.companies.owns(company) and self.exchanges.owns(exchange)):
            raise InvalidArgumentError(
                f"{company!r} on {exchange!r} does not belong to this market"
            )
        return Share(company=company, exchange=exchange)
