"""People with sayings: sorting and JSON encoding."""

from __future__ import annotations

import json
from dataclasses import dataclass, field


@dataclass
class Person:
    """A person with a name, an age and a list of sayings."""

    first: str = ""
    last: str = ""
    age: int = 0
    sayings: list = field(default_factory=list)

    def to_dict(self):
        return {
            "First": self.first,
            "Last": self.last,
            "Age": self.age,
            "Sayings": list(self.sayings),
        }


_HTML_ESCAPES = {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026"}


def sort_by_age(people):
    """Return the people ordered from youngest to oldest."""
    return sorted(people, key=lambda person: person.age)


def people_to_json(people):
    """Encode the people as a compact JSON array."""
    text = json.dumps(
        [person.to_dict() for person in people],
        ensure_ascii=False,
        separators=(",", ":"),
    )
    for char, escape in _HTML_ESCAPES.items():
        text = text.replace(char, escape)
    return text


def _expect_str(value, key):
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _person_from_object(obj):
    if obj is None:
        return Person()
    if not isinstance(obj, dict):
        raise ValueError("each person must be a JSON object")
    person = Person()
    for key, value in obj.items():
        name = key.lower()
        if name == "first":
            person.first = _expect_str(value, key)
        elif name == "last":
            person.last = _expect_str(value, key)
        elif name == "age":
            if value is None:
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"field {key!r} must be an integer")
            person.age = value
        elif name == "sayings":
            if value is None:
                person.sayings = []
                continue
            if not isinstance(value, list):
                raise ValueError(f"field {key!r} must be an array")
            person.sayings = [_expect_str(saying, key) for saying in value]
    return person


def people_from_json(text):
    """Decode a JSON array of people; field names match without regard to case."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON: {exc}") from exc
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError("people must be a JSON array")
    return [_person_from_object(item) for item in data]