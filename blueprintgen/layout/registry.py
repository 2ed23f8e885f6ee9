"""StrategyRegistry — discover, register, and look up placement strategies."""

from __future__ import annotations

import logging

from blueprintgen.layout.strategies.base import PlacementStrategy
from blueprintgen.layout.strategies.generic import GenericStrategy

logger = logging.getLogger(__name__)


class StrategyRegistry:
    """Maps building-type tags to placement strategies.

    Types without a registered strategy resolve to the fallback
    (:class:`GenericStrategy` unless another is given).
    """

    def __init__(self, fallback: PlacementStrategy | None = None) -> None:
        self._strategies: dict[str, PlacementStrategy] = {}
        self.fallback = fallback or GenericStrategy()

    def register(self, strategy: PlacementStrategy) -> None:
        """Add (or replace) the strategy for its building type."""
        self._strategies[strategy.building_type] = strategy
        logger.debug("Registered placement strategy: %s", strategy.building_type)

    def auto_discover(self) -> None:
        """Load all built-in strategies."""
        from blueprintgen.layout.strategies.house import HouseStrategy
        from blueprintgen.layout.strategies.office import OfficeStrategy
        from blueprintgen.layout.strategies.restaurant import RestaurantStrategy
        from blueprintgen.layout.strategies.shop import ShopStrategy

        for strategy_cls in [
            HouseStrategy,
            OfficeStrategy,
            ShopStrategy,
            RestaurantStrategy,
        ]:
            self.register(strategy_cls())

    def get(self, building_type: str) -> PlacementStrategy:
        """Return the strategy for *building_type*, or the fallback."""
        strategy = self._strategies.get(building_type)
        if strategy is None:
            logger.debug("No strategy for '%s', using %s", building_type, self.fallback.building_type)
            return self.fallback
        return strategy

    def has(self, building_type: str) -> bool:
        return building_type in self._strategies

    def list_strategies(self) -> list[PlacementStrategy]:
        """Return all registered strategies (fallback excluded)."""
        return list(self._strategies.values())


def default_registry() -> StrategyRegistry:
    """A registry with every built-in strategy loaded."""
    registry = StrategyRegistry()
    registry.auto_discover()
    return registry
