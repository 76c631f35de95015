"""Objective registry - manages all available test functions."""

from __future__ import annotations

from popopt.objectives.base import ObjectiveTemplate


class ObjectiveRegistry:
    """Registry of all available objective templates."""

    def __init__(self) -> None:
        self._templates: dict[str, ObjectiveTemplate] = {}

    def register(self, template: ObjectiveTemplate) -> None:
        self._templates[template.objective_id] = template

    def get(self, objective_id: str) -> ObjectiveTemplate:
        if objective_id not in self._templates:
            available = ", ".join(sorted(self._templates.keys()))
            raise KeyError(f"Unknown objective: {objective_id}. Available: {available}")
        return self._templates[objective_id]

    def list_all(self) -> list[ObjectiveTemplate]:
        return list(self._templates.values())


# Global registry instance
_global_registry: ObjectiveRegistry | None = None


def get_registry() -> ObjectiveRegistry:
    """Get the global objective registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = _create_default_registry()
    return _global_registry


def _create_default_registry() -> ObjectiveRegistry:
    from popopt.objectives.builtin import Rastrigin, ShiftedSphere, Sphere

    registry = ObjectiveRegistry()
    for template_cls in [Sphere, Rastrigin, ShiftedSphere]:
        registry.register(template_cls())
    return registry
