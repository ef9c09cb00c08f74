"""Example usage of sort order texts to sort records and build MongoDB sorts."""

from dataclasses import dataclass
from typing import Any, List, Optional

from comparator import ComparatorBuilder, SortOrders, build_comparator
from comparator.exceptions import ComparatorError
from comparator.mapper import SortMapper


@dataclass
class Address:
    city: str


@dataclass
class Customer:
    last_name: str
    first_name: str
    age: Optional[int]
    address: Address


def print_separator(title: str = "") -> None:
    """Print a separator line with optional title."""
    print("\n" + "=" * 80)
    if title:
        print(title)
        print("-" * 80)


def print_customers(customers: List[Any]) -> None:
    for customer in customers:
        print(f"  {customer.last_name:<10} {customer.first_name:<10} {str(customer.age):<5} {customer.address.city}")


def main() -> None:
    customers = [
        Customer("smith", "Zoe", 31, Address("Berlin")),
        Customer("Doe", "John", None, Address("Paris")),
        Customer("Smith", "Anna", 45, Address("Athens")),
        Customer("Baker", "Lea", 31, Address("Berlin")),
    ]

    # Sort criteria as they would arrive in a query parameter
    text = "last_name,ignorecase;first_name"
    print_separator(f"Sorted by '{text}'")
    print_customers(build_comparator(text).sort(customers))

    text = "age,desc,nullsfirst;address.city"
    print_separator(f"Sorted by '{text}'")
    print_customers(build_comparator(text).sort(customers))

    print_separator("Sorted with the builder")
    comparator = ComparatorBuilder().add("address.city").add_delegate("first_name", lambda a, b: len(a) - len(b)).build()
    print_customers(comparator.sort(customers))

    print_separator("Canonical text and MongoDB sort")
    sort_orders = SortOrders.from_text("age,desc,nullsfirst;last_name")
    print(f"Text: {sort_orders}")
    print(f"find().sort(): {SortMapper.to_mongo_sort(sort_orders)}")
    print(f"Pipeline stage: {SortMapper.to_sort_stage(sort_orders)}")

    print_separator("Invalid sort request")
    try:
        build_comparator("zip_code").sort(customers)
    except ComparatorError as e:
        print(f"Error: {e}")


if __name__ == "__main__":
    main()
