from assertpack.core.canonical import prefix_block, represent
from assertpack.core.models import FailureRecord, Location, Mismatch, Outcome
from assertpack.diff import format_failure, format_outcome, format_soft_report
from assertpack.expect import all_of, evaluate, is_equal_to, is_greater_than


def test_passing_outcome_renders_empty() -> None:
    assert format_outcome(Outcome.success("subject to be 1"), "red-green") == ""


def test_comparison_failure_shows_actual_then_expected() -> None:
    outcome = evaluate("bar", is_equal_to("baz"))

    assert format_outcome(outcome, "off") == (
        "expected subject to be equal to 'baz'\n"
        "   but was: 'bar'\n"
        "  expected: 'baz'"
    )


def test_comparison_failure_highlights_the_difference() -> None:
    outcome = evaluate("bar", is_equal_to("baz"))

    rendered = format_outcome(outcome, "red-green")

    assert "   but was: 'ba\x1b[31mr\x1b[0m'" in rendered
    assert "  expected: 'ba\x1b[32mz\x1b[0m'" in rendered


def test_described_comparison_is_not_highlighted() -> None:
    outcome = evaluate(1, is_greater_than(5))

    assert format_outcome(outcome, "red-green") == (
        "expected subject to be greater than 5\n"
        "   but was: 1\n"
        "  expected: > 5"
    )


def test_collection_failure_renders_items() -> None:
    outcome = evaluate([1, 2, 3], is_equal_to([1, 4, 3]))

    rendered = format_outcome(outcome, "off")

    assert "   but was: [1, 2, 3]" in rendered
    assert "  expected: [1, 4, 3]" in rendered


def test_header_combines_location_and_description() -> None:
    outcome = evaluate(2, is_equal_to(3))
    location = Location(file="tests/test_math.py", line=7)

    rendered = format_outcome(outcome, "off", description="sum of parts", location=location)

    assert rendered.splitlines()[0] == "tests/test_math.py:7: sum of parts"


def test_header_with_only_location_ends_with_colon() -> None:
    record = FailureRecord(
        mismatch=Mismatch(description="expected subject to be 3"),
        location=Location(file="a.py", line=1, column=4),
    )

    assert format_failure(record, "off") == "a.py:1:4:\nexpected subject to be 3"


def test_combined_failure_renders_each_child_with_position() -> None:
    outcome = evaluate(1, all_of(is_equal_to(2), is_greater_than(5)))

    lines = format_outcome(outcome, "off").splitlines()

    assert lines == [
        "[1] expected subject to be equal to 2",
        "       but was: 1",
        "      expected: 2",
        "[2] expected subject to be greater than 5",
        "       but was: 1",
        "      expected: > 5",
    ]


def test_soft_report_numbers_failures_and_summarizes() -> None:
    failures = [
        FailureRecord(mismatch=Mismatch(description="first problem")),
        FailureRecord(mismatch=Mismatch(description="second problem")),
    ]

    report = format_soft_report(failures, "off", checks=5)

    assert report == "1) first problem\n\n2) second problem\n\n2 of 5 soft assertions failed"


def test_soft_report_singular_summary() -> None:
    report = format_soft_report([FailureRecord(mismatch=Mismatch(description="x"))], "off")

    assert report.endswith("1 of 1 soft assertion failed")


def test_represent_is_order_stable_for_mappings_and_sets() -> None:
    assert represent({"b": 1, "a": 2}) == "{'a': 2, 'b': 1}"
    assert represent({3, 1, 2}) == "{1, 2, 3}"
    assert represent((1,)) == "(1,)"


def test_prefix_block_aligns_continuation_lines() -> None:
    assert prefix_block("1) ", "one\ntwo") == "1) one\n   two"


def test_tuple_against_list_shows_the_differing_brackets() -> None:
    outcome = evaluate((1, 2), is_equal_to([1, 2]))

    plain = format_outcome(outcome, "off")
    styled = format_outcome(outcome, "red-green")

    assert "   but was: (1, 2)" in plain
    assert "  expected: [1, 2]" in plain
    assert styled != plain


def test_mapping_comparison_renders_braces() -> None:
    outcome = evaluate({"a": 1, "b": 2}, is_equal_to({"a": 1, "b": 3}))

    rendered = format_outcome(outcome, "off")

    assert outcome.mismatch is not None
    assert outcome.mismatch.granularity == "items"
    assert "   but was: {'a': 1, 'b': 2}" in rendered
    assert "  expected: {'a': 1, 'b': 3}" in rendered


def test_tuple_and_set_comparisons_keep_their_brackets() -> None:
    single = format_outcome(evaluate((1,), is_equal_to((2,))), "off")
    sets = format_outcome(evaluate({1, 2}, is_equal_to({1, 3})), "off")
    empty = format_outcome(evaluate(set(), is_equal_to({1})), "off")

    assert "   but was: (1,)" in single
    assert "  expected: (2,)" in single
    assert "   but was: {1, 2}" in sets
    assert "   but was: set()" in empty


def test_represent_handles_self_referencing_containers() -> None:
    items: list[object] = [1]
    items.append(items)
    mapping: dict[str, object] = {}
    mapping["self"] = mapping

    assert represent(items) == repr(items) == "[1, [...]]"
    assert represent(mapping) == "{'self': {...}}"


def test_self_referencing_subject_fails_without_crashing() -> None:
    items: list[object] = [1]
    items.append(items)

    outcome = evaluate(items, is_equal_to([1]))

    assert outcome.failed
    assert "[1, [1, [...]]]" in format_outcome(outcome, "off")
