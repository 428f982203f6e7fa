#!/usr/bin/env python3
"""
Demo script for the cafe directory.

Runs the sample queries against the service layer and prints the status
and body each would be served with.
"""

import sys

from cafe_directory.entities import CafeQuery
from cafe_directory.handlers import CafeHandler
from cafe_directory.repositories import JsonFileCafeRepository, StaticCafeRepository
from cafe_directory.services import CafeService


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demo_queries(service: CafeService) -> None:
    """Show valid and invalid queries."""
    print_section("Cafe Queries")

    queries = [
        CafeQuery(count="5", city="moscow"),
        CafeQuery(count="2", city="moscow"),
        CafeQuery(count="0", city="moscow"),
        CafeQuery(count="1", city="spb"),
        CafeQuery(count="", city="moscow"),
        CafeQuery(count="all", city="moscow"),
    ]

    for query in queries:
        response = CafeHandler.render(service.list_cafes(query))
        print(f"\n  GET /cafe?count={query.count}&city={query.city}")
        print(f"  {response.status_code} {response.body.decode('utf-8')!r}")


def demo_directory(service: CafeService) -> None:
    """Print the loaded directory."""
    print_section("Directory")

    for city in service.directory:
        cafes = service.directory.cafes_for(city)
        print(f"\n  {city} ({len(cafes)} cafes)")
        for name in cafes:
            print(f"    - {name}")


def main() -> None:
    source = JsonFileCafeRepository.create(sys.argv[1]) if len(sys.argv) > 1 else StaticCafeRepository.create()
    print(f"Loading cafes from {source.describe()}")
    service = CafeService.create(source=source)

    demo_directory(service)
    demo_queries(service)


if __name__ == "__main__":
    main()
