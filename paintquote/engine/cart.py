"""Cart aggregator.

A Cart is an explicitly owned, per-session object. It holds line items in
insertion order, derives totals on demand and writes a snapshot to its store
after every mutation. Persistence is best effort: a failed write is logged and
the in-memory cart stays authoritative.

Per-door services (interior and front doors) merge on add: a new line with the
same door configuration as an existing line folds into it, and the breakdown is
recomputed from the combined count rather than added up.
"""

import logging
import uuid
from typing import Mapping, Optional

from paintquote.data.base import SnapshotStore
from paintquote.engine import validation
from paintquote.engine.doors import estimate_doors
from paintquote.engine.eligibility import check_eligibility
from paintquote.engine.services import describe_service, door_family, estimate_service
from paintquote.engine.totals import DEFAULT_POLICY, TotalsPolicy, compute_totals
from paintquote.models.cart import CartTotals, EligibilityResult, LineItem
from paintquote.models.doors import DoorSpec
from paintquote.models.estimate import EstimateBreakdown
from paintquote.models.rates import DEFAULT_RATES, RateTable

logger = logging.getLogger(__name__)


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def _door_params(params: Mapping, spec: DoorSpec) -> dict:
    """Payload with the door configuration written out explicitly."""
    return {
        **params,
        "door_count": spec.count,
        "include_frames": spec.include_frames,
        "include_hardware": spec.include_hardware,
        "include_weatherproofing": spec.include_weatherproofing,
    }


class Cart:
    def __init__(
        self,
        store: Optional[SnapshotStore] = None,
        session_id: Optional[str] = None,
        policy: TotalsPolicy = DEFAULT_POLICY,
        rates: RateTable = DEFAULT_RATES,
        items: Optional[list[LineItem]] = None,
    ):
        self.store = store
        self.session_id = session_id
        self.policy = policy
        self.rates = rates
        self.items: list[LineItem] = list(items or [])

    @classmethod
    def load(
        cls,
        store: SnapshotStore,
        session_id: str,
        policy: TotalsPolicy = DEFAULT_POLICY,
        rates: RateTable = DEFAULT_RATES,
    ) -> "Cart":
        """Rebuild a session's cart from its snapshot, or start empty."""
        try:
            snapshot = store.load(session_id)
        except Exception:
            logger.warning("Failed to load cart %s, starting empty", session_id, exc_info=True)
            snapshot = None

        items = []
        for raw in (snapshot or {}).get("items", []):
            try:
                items.append(LineItem.from_dict(raw))
            except (KeyError, TypeError, ValueError, ArithmeticError):
                logger.warning("Dropping unreadable line item in cart %s", session_id)
        return cls(store=store, session_id=session_id, policy=policy, rates=rates, items=items)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_item(self, service_id: str, params: Mapping) -> LineItem:
        """Estimate a configured service and add it, merging same-configuration doors.

        Raises:
            UnknownServiceError: unknown service id.
            InputValidationError: invalid payload.
            ValueError: the payload is not computable (or the service is custom-quote).
        """
        name, service_type = describe_service(service_id)
        params = dict(params)

        family = door_family(service_id)
        if family is not None:
            spec = validation.door_spec(family, params)
            existing = self._find_door_line(spec)
            if existing is not None:
                return self._merge_doors(existing, spec)
            params = _door_params(params, spec)
        estimate = self._estimate(service_id, params)

        item = LineItem(
            id=_new_id("line"),
            service_id=service_id,
            service_name=name,
            service_type=service_type,
            params=params,
            estimate=estimate,
        )
        self.items.append(item)
        logger.debug("Added %s to cart %s as %s", service_id, self.session_id, item.id)
        self._persist()
        return item

    def update_item(self, item_id: str, params: Mapping) -> LineItem:
        """Re-run the estimator for an existing line with new parameters."""
        item = self.get_item(item_id)
        params = dict(params)
        estimate = self._estimate(item.service_id, params)

        family = door_family(item.service_id)
        if family is not None:
            params = _door_params(params, validation.door_spec(family, params))

        item.params = params
        item.estimate = estimate
        self._persist()
        return item

    def remove_item(self, item_id: str) -> None:
        item = self.get_item(item_id)
        self.items.remove(item)
        self._persist()

    def clear(self) -> None:
        self.items.clear()
        self._persist()

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    def get_item(self, item_id: str) -> LineItem:
        for item in self.items:
            if item.id == item_id:
                return item
        raise KeyError(item_id)

    @property
    def totals(self) -> CartTotals:
        return compute_totals(self.items, self.policy)

    @property
    def eligibility(self) -> EligibilityResult:
        return check_eligibility(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "items": [item.to_dict() for item in self.items],
            "totals": self.totals.to_dict(),
        }

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _estimate(self, service_id: str, params: Mapping) -> EstimateBreakdown:
        estimate = estimate_service(service_id, params, self.rates)
        if estimate is None:
            raise ValueError(f"No estimate available for {service_id} with the given parameters")
        return estimate

    def _find_door_line(self, spec: DoorSpec) -> Optional[LineItem]:
        key = spec.configuration_key
        for item in self.items:
            if door_family(item.service_id) != spec.family:
                continue
            if validation.door_spec(spec.family, item.params).configuration_key == key:
                return item
        return None

    def _merge_doors(self, item: LineItem, spec: DoorSpec) -> LineItem:
        if spec.count <= 0:
            raise ValueError(f"No estimate available for {item.service_id} x{spec.count}")
        current = validation.door_spec(spec.family, item.params)
        combined = spec.with_count(current.count + spec.count)
        estimate = estimate_doors(combined, self.rates)
        if estimate is None:
            raise ValueError(f"No estimate available for {item.service_id} x{combined.count}")

        item.params = _door_params(item.params, combined)
        item.estimate = estimate
        logger.debug(
            "Merged %d %s into %s (now %d)", spec.count, spec.family.value, item.id, combined.count
        )
        self._persist()
        return item

    def _persist(self) -> None:
        if self.store is None or self.session_id is None:
            return
        try:
            self.store.save(self.session_id, self.to_dict())
        except Exception:
            logger.warning("Failed to persist cart %s", self.session_id, exc_info=True)
