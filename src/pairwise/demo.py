"""
Demo: print every example scenario to stdout, or export them as YAML/JSON.
"""

from pairwise.examples import build_all_scenarios, build_people
from pairwise.serialization import people_to_json, scenarios_to_yaml


def print_scenarios(results):
    """Print each scenario's title and lines, separated by a blank line."""
    for index, result in enumerate(results):
        if index:
            print()
        print(result.title)
        for line in result.lines:
            print(line)


def main():
    print_scenarios(build_all_scenarios())


def export_main():
    """Print the scenarios as YAML, then the Person records as JSON."""
    print(scenarios_to_yaml(build_all_scenarios()), end="")
    print(people_to_json(build_people()))


if __name__ == "__main__":
    main()
