"""
Prototype pattern.

Instances share a frozen template and carry only their own overrides,
so cloning never duplicates the shared state.
"""

# pylint: disable=too-few-public-methods

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping

from catalogue.patterns.base import PatternCategory, PatternDemo
from catalogue.registry import pattern


@dataclass(frozen=True)
class Template:
    name: str
    defaults: Mapping[str, Any]


@dataclass
class Instance:
    template: Template
    overrides: Dict[str, Any] = field(default_factory=dict)

    def get(self, key: str) -> Any:
        if key in self.overrides:
            return self.overrides[key]
        return self.template.defaults[key]

    def clone(self, **overrides: Any) -> "Instance":
        return Instance(self.template, {**self.overrides, **overrides})


@pattern()
class PrototypeDemo(PatternDemo):
    name = "Prototype"
    category = PatternCategory.CREATIONAL
    intent = (
        "Specify the kinds of objects to create using a prototypical "
        "instance, and create new objects by copying this prototype."
    )
    summary = """
        New objects start as copies of a configured prototype instead of
        being assembled from scratch. Here the shared part is an immutable
        template that every copy references; each copy stores only the
        fields it changes, so a clone is cheap and can never corrupt the
        template it came from.
    """
    applicability = (
        "the classes to instantiate are chosen at run time",
        "instances differ in only a few combinations of state",
        "building an object from scratch is much more expensive than copying one",
    )
    consequences = (
        "products can be added and removed at run time by registering prototypes",
        "shared state lives once, in the template",
        "every clone has to decide what it shares and what it owns",
    )
    participants = (Template, Instance)

    def run(self) -> None:
        knight = Template("knight", MappingProxyType({"hp": 100, "weapon": "sword"}))
        base = Instance(knight)
        archer = base.clone(weapon="bow")
        veteran = archer.clone(hp=150)

        for label, unit in (("base", base), ("archer", archer), ("veteran", veteran)):
            self.emit(f"{label}: hp={unit.get('hp')} weapon={unit.get('weapon')}")
        self.emit("shared template:", veteran.template is base.template)
