"""Minimal app that exercises hard and soft AssertKit assertions."""

from __future__ import annotations

import sys

from assertkit import (
    SoftAssertionError,
    all_of,
    assert_that,
    contains,
    is_greater_than,
    not_,
    soft_assertions,
    use_highlight_mode,
    verify_that,
)


def check_order(order: dict[str, object]) -> None:
    with soft_assertions("order"):
        verify_that(order["id"], name="order id").expecting(is_greater_than(0))
        verify_that(order["items"], name="items").expecting(
            all_of(contains("book"), not_(contains("refund")))
        )
        verify_that(order["total"], name="total").is_equal_to(42)


def main() -> int:
    assert_that([1, 2, 3]).each_item(is_greater_than(0))

    check_order({"id": 7, "items": ["book", "pen"], "total": 42})

    with use_highlight_mode("off"):
        try:
            check_order({"id": 0, "items": ["pen", "refund"], "total": 40})
        except SoftAssertionError as error:
            print(error)
            return 0 if len(error.failures) == 3 else 1
    return 1


if __name__ == "__main__":
    sys.exit(main())
