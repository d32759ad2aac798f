"""
Dispatch Configuration

Selects the hall-call allocation strategy and its tuning parameters.
"""

from dataclasses import dataclass, field
from typing import Dict, Any


@dataclass
class AllocationStrategyConfig:
    """Configuration for hall call allocation strategy"""
    name: str = "LowestCost"
    parameters: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not self.name:
            raise ValueError("allocation_strategy.name cannot be empty")


@dataclass
class DispatchConfig:
    """
    Dispatcher configuration

    Contains only control logic settings, not building or timing specifications.
    """
    allocation_strategy: AllocationStrategyConfig = None

    def __post_init__(self):
        if self.allocation_strategy is None:
            self.allocation_strategy = AllocationStrategyConfig()

    @classmethod
    def from_dict(cls, data: dict) -> 'DispatchConfig':
        """Create DispatchConfig from dictionary"""
        dispatch_data = data.get('dispatch', data)

        alloc_data = dispatch_data.get('allocation_strategy', {})
        allocation_strategy = AllocationStrategyConfig(
            name=alloc_data.get('name', 'LowestCost'),
            parameters=alloc_data.get('parameters') or {}
        )

        return cls(allocation_strategy=allocation_strategy)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization"""
        return {
            'dispatch': {
                'allocation_strategy': {
                    'name': self.allocation_strategy.name,
                    'parameters': self.allocation_strategy.parameters
                }
            }
        }

    def validate(self):
        """Validate configuration consistency"""
        if not isinstance(self.allocation_strategy.parameters, dict):
            raise ValueError("allocation_strategy.parameters must be a mapping")
