"""
Example scenario builders.

Each builder runs one combinator over fixed sample data and returns a
ScenarioResult holding the lines the demo prints:

    1. merge numbers with their English words
    2. merge names and ages into Person records
    3. zip two float lists through sum, product and comparison
    4. zip five letters with three positions (extras dropped)
"""
from typing import List

from pairwise.combinators import merge_collections, zip_collections
from pairwise.model import Person, ScenarioResult


def compare_numbers(a: float, b: float) -> str:
    if a > b:
        verdict = "First is larger"
    elif a < b:
        verdict = "Second is larger"
    else:
        verdict = "Both are equal"
    return f"{a} vs {b}: {verdict}"


def build_number_words() -> ScenarioResult:
    numbers = [1, 2, 3, 4, 5]
    words = ["one", "two", "three", "four", "five"]
    lines = merge_collections(numbers, words, lambda num, word: f"{num} = {word}")
    return ScenarioResult(
        title="Example 1: Merging numbers with their word representations",
        lines=lines,
    )


def build_people() -> List[Person]:
    names = ["Alice", "Bob", "Charlie"]
    ages = [25, 30, 22]
    return merge_collections(names, ages, Person)


def build_person_scenario() -> ScenarioResult:
    return ScenarioResult(
        title="Example 2: Creating Person objects from names and ages",
        lines=[str(person) for person in build_people()],
    )


def build_math_scenario() -> ScenarioResult:
    first_numbers = [1.5, 2.5, 3.5]
    second_numbers = [0.5, 1.0, 1.5]

    sums = zip_collections(first_numbers, second_numbers, lambda a, b: a + b)
    products = zip_collections(first_numbers, second_numbers, lambda a, b: a * b)
    comparisons = zip_collections(first_numbers, second_numbers, compare_numbers)

    lines = [f"Sums: {sums}", f"Products: {products}", "Comparisons:"]
    lines.extend(comparisons)
    return ScenarioResult(title="Example 3: Mathematical operations", lines=lines)


def build_positioned_letters() -> ScenarioResult:
    letters = ["A", "B", "C", "D", "E"]
    positions = [1, 2, 3]
    lines = zip_collections(letters, positions, lambda letter, position: f"{position}. {letter}")
    return ScenarioResult(
        title="Example 4: Using different sized collections",
        lines=lines,
    )


def build_all_scenarios() -> List[ScenarioResult]:
    return [
        build_number_words(),
        build_person_scenario(),
        build_math_scenario(),
        build_positioned_letters(),
    ]
