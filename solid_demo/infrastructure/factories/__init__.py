"""Factories for creating strategy instances (Factory Pattern)."""

from solid_demo.infrastructure.factories.strategy_factory import StrategyFactory

__all__ = [
    "StrategyFactory",
]
