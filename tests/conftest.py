"""Shared test fixtures for linkedcontainers."""

import pytest

from linkedcontainers import LinkedList, LinkedMap


class Person:
    """Value type without its own ordering; compared by age only."""

    def __init__(self, name: str, age: int):
        self.name = name
        self.age = age

    def __repr__(self) -> str:
        return f"Person({self.name!r}, {self.age})"


def compare_age(a: Person, b: Person) -> int:
    if a.age < b.age:
        return -1
    if a.age == b.age:
        return 0
    return 1


@pytest.fixture
def abc_map() -> LinkedMap:
    """Unbounded map holding a=1, b=2, c=3 pushed to the back in order."""
    m = LinkedMap()
    m.push_back("a", 1)
    m.push_back("b", 2)
    m.push_back("c", 3)
    return m


@pytest.fixture
def make_person():
    """Factory for age-compared value objects."""
    return Person


@pytest.fixture
def age_comparator():
    return compare_age


@pytest.fixture
def people() -> list:
    return [Person("ann", 32), Person("bob", 20), Person("cid", 27), Person("dee", 25)]


@pytest.fixture
def people_list(people) -> LinkedList:
    ll = LinkedList(comparator=compare_age)
    ll.push_back(*people)
    return ll
