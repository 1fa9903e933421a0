#!/usr/bin/env python3
"""
Demo: primaids map and text helpers.

Prints the documented example for each helper.
"""

from pprint import pprint

from primaids import (
    batch,
    format,
    get_and_call,
    get_and_unset,
    get_nested,
    group_by,
    is_empty,
    rename,
    set_if_true,
    sub_set,
    to_ordered_map,
)


def main():
    print("=" * 80)
    print("PRIMAIDS DEMO")
    print("=" * 80)

    print("\nformat:")
    print(format({"oranges": 0.69, "bananas": 0.79, "apples": 0.89}, "Fruit: {key} only {value} per pound\n"))

    print("get_and_unset:")
    letters = to_ordered_map(["a", "b", "c"])
    print(" returned:", get_and_unset(letters, 1))
    print(" remaining:", letters)

    print("\nget_and_call:")
    print(" ", get_and_call(["a", "b", "c"], 1, str.upper))

    print("\nget_nested:")
    settings = {"db": {"host": "localhost", "login": {"username": "scott", "password": "tiger"}}}
    print(" ", get_nested(settings, "db.login.username"))

    print("\nrename:")
    fruit = {"foo": "bar"}
    rename(fruit, "foo", "goo")
    print(" ", fruit)

    print("\nset_if_true:")
    values = {}
    value = "a value"
    set_if_true(values, 0, value, value is not None)
    print(" ", values)

    print("\ngroup_by:")
    people = [
        {"name": "Sam", "gender": "M", "age": "Over 35"},
        {"name": "Linda", "gender": "F", "age": "25 - 35"},
        {"name": "Max", "gender": "M", "age": "Under 25"},
        {"name": "Phillip", "gender": "M", "age": "25 - 35"},
    ]
    pprint(group_by(people, "age"), sort_dicts=False)

    print("\nsub_set:")
    book = {
        "author": "Gambardella, Matthew",
        "title": "XML Developer's Guide",
        "genre": "Computer",
        "price": 44.95,
        "id": "bk101",
        "url": "/books/bk101",
    }
    pprint(sub_set(book, ["url", "title", "price"]), sort_dicts=False)

    print("\nbatch:")
    print(" ", batch(["a", "b", "c", "d", "e"], 2))

    print("\nis_empty:")
    for text in (None, "", "\t\n ", "a"):
        print(f"  {text!r}: {is_empty(text)}")

    print("=" * 80)


if __name__ == "__main__":
    main()
