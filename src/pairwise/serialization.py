"""
Serialization helpers for demonstration objects (Person, ScenarioResult).

Provides JSON/YAML round-trip via intermediate dict representation.
This module intentionally keeps serialization structure stable and explicit.
"""
from __future__ import annotations

import json
from typing import Any, Dict, List

import yaml

from pairwise.model import Person, ScenarioResult


def person_to_dict(p: Person) -> Dict[str, Any]:
    return {"name": p.name, "age": p.age}


def person_from_dict(d: Dict[str, Any]) -> Person:
    return Person(name=d["name"], age=d["age"])


def people_to_json(people: List[Person]) -> str:
    return json.dumps([person_to_dict(p) for p in people], sort_keys=True)


def people_from_json(s: str) -> List[Person]:
    return [person_from_dict(d) for d in json.loads(s)]


def scenario_to_dict(r: ScenarioResult) -> Dict[str, Any]:
    return {"title": r.title, "lines": list(r.lines)}


def scenario_from_dict(d: Dict[str, Any]) -> ScenarioResult:
    if not isinstance(d, dict):
        raise TypeError(f"Unsupported scenario dict type: {type(d)}")
    return ScenarioResult(title=d["title"], lines=list(d.get("lines", [])))


def scenarios_to_json(results: List[ScenarioResult]) -> str:
    return json.dumps([scenario_to_dict(r) for r in results], sort_keys=True)


def scenarios_from_json(s: str) -> List[ScenarioResult]:
    return [scenario_from_dict(d) for d in json.loads(s)]


def scenarios_to_yaml(results: List[ScenarioResult]) -> str:
    return yaml.safe_dump([scenario_to_dict(r) for r in results])


def scenarios_from_yaml(s: str) -> List[ScenarioResult]:
    d = yaml.safe_load(s)
    return [scenario_from_dict(item) for item in d or []]
