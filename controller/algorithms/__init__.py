"""Allocation strategies and the registry used to build them from configuration"""

from typing import Dict, Type

from .lowest_cost import UNREACHABLE_COST, LowestCostStrategy
from ..interfaces.allocation_strategy import IAllocationStrategy

STRATEGY_REGISTRY: Dict[str, Type[IAllocationStrategy]] = {
    "LowestCost": LowestCostStrategy,
}


def create_strategy(name: str, **parameters) -> IAllocationStrategy:
    """
    Build an allocation strategy by its configured name

    Raises:
        ValueError: If no strategy is registered under `name`
    """
    cls = STRATEGY_REGISTRY.get(name)
    if cls is None:
        raise ValueError(f"Unknown allocation strategy: {name}. Available: {', '.join(STRATEGY_REGISTRY)}")
    return cls(**parameters)


__all__ = [
    'IAllocationStrategy',
    'LowestCostStrategy',
    'STRATEGY_REGISTRY',
    'UNREACHABLE_COST',
    'create_strategy',
]
