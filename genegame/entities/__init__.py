"""Simulation entities."""

from genegame.entities.creature import Creature, DietaryClass, LifeState, classify_diet

__all__ = ["Creature", "DietaryClass", "LifeState", "classify_diet"]
