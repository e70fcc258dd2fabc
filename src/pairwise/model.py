"""
Demonstration Model Objects

Plain data classes used by the example scenarios:
    - Person (structured record built by merge_collections)
    - ScenarioResult (rendered output of one example)

ARCHITECTURAL RULE:
    These objects carry data only.
    The combinators know nothing about them.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class Person:
    """
    A person with a name and an age.

    Exists to show merge_collections producing structured records:

        merge_collections(["Alice"], [25], Person)
            -> [Person(name="Alice", age=25)]

    Properties:
        name: Person's name
        age: Age in years

    The text form is fixed: Person{name='Alice', age=25}
    """

    name: str
    age: int

    def __str__(self) -> str:
        return f"Person{{name='{self.name}', age={self.age}}}"


@dataclass
class ScenarioResult:
    """
    Rendered output of a single example scenario.

    Properties:
        title: Heading printed above the scenario
        lines: Output lines, in print order
    """

    title: str
    lines: List[str] = field(default_factory=list)
