import random

from deckgen.frequency.records import MAX_RANK
from deckgen.input.tables import Entry, OverrideRule
from deckgen.output.ranking import apply_frequency_order, find_override, prepend_extras, rank_entries, renumber


def _entries(*fronts):
    return [Entry(front=f, back=f.lower()) for f in fronts]


def _fronts(entries):
    return [e.front for e in entries]


def test_sorts_by_rank_ascending():
    entries = _entries("Haus", "Buches", "das Auto")
    ranked = rank_entries(entries, [10, 100, 0])
    assert _fronts(ranked) == ["das Auto", "Haus", "Buches"]
    assert [e.order for e in ranked] == [0, 1, 2]


def test_ties_keep_input_order():
    entries = _entries("a", "b", "c", "d")
    ranked = rank_entries(entries, [5, 1, 5, 1])
    assert _fronts(ranked) == ["b", "d", "a", "c"]


def test_absent_entries_sort_last():
    entries = _entries("unknown", "Haus", "also-unknown", "Buch")
    ranked = rank_entries(entries, [MAX_RANK, 10, MAX_RANK, 100])
    assert _fronts(ranked) == ["Haus", "Buch", "unknown", "also-unknown"]


def test_find_override_is_case_insensitive_prefix():
    rules = [OverrideRule("HAUS", 3)]
    assert find_override("Hausaufgabe", rules) == rules[0]
    assert find_override("das Haus", rules) is None


def test_find_override_first_match_wins():
    rules = [OverrideRule("Ha", 7), OverrideRule("Haus", 1)]
    assert find_override("Haus", rules) == rules[0]


def test_override_moves_entry_to_configured_position():
    entries = _entries("a", "b", "c", "d", "e")
    ranked = rank_entries(entries, [0, 1, 2, 3, 4], overrides=[OverrideRule("e", 0)])
    # "e" and "a" both have order 0; "a" was first after the frequency sort
    assert _fronts(ranked) == ["a", "e", "b", "c", "d"]


def test_override_beyond_end_moves_entry_last():
    entries = _entries("a", "b", "c")
    ranked = rank_entries(entries, [0, 1, 2], overrides=[OverrideRule("A", 99)])
    assert _fronts(ranked) == ["b", "c", "a"]
    assert [e.order for e in ranked] == [0, 1, 2]


def test_override_applies_to_absent_entry():
    entries = _entries("rare", "common")
    ranked = rank_entries(entries, [MAX_RANK, 5], overrides=[OverrideRule("rare", -1)])
    assert _fronts(ranked) == ["rare", "common"]


def test_apply_frequency_order_sets_intermediate_orders():
    entries = _entries("x", "y", "z")
    apply_frequency_order(entries, [3, 1, 2], overrides=[OverrideRule("x", 10)])
    assert [(e.front, e.order) for e in entries] == [("y", 0), ("z", 1), ("x", 10)]


def test_extras_come_first_in_file_order():
    entries = _entries("Haus", "Buch")
    extras = [Entry("Hallo", "hello", order=50), Entry("Tschüss", "bye", order=2)]
    ranked = rank_entries(entries, [1, 2], extras=extras)
    assert _fronts(ranked) == ["Hallo", "Tschüss", "Haus", "Buch"]
    assert [e.order for e in ranked] == [0, 1, 2, 3]


def test_extras_precede_overridden_entries():
    entries = _entries("a", "b")
    extras = [Entry("x", "x", order=5)]
    ranked = rank_entries(entries, [0, 1], overrides=[OverrideRule("b", -100)], extras=extras)
    assert _fronts(ranked) == ["x", "b", "a"]


def test_prepend_and_renumber():
    entries = _entries("a")
    prepend_extras(entries, [Entry("e", "e", order=9)])
    renumber(entries)
    assert [(e.front, e.order) for e in entries] == [("e", 0), ("a", 1)]


def test_orders_are_dense_permutation_for_random_inputs():
    rng = random.Random(1234)
    for _ in range(50):
        n = rng.randint(0, 30)
        entries = [Entry(f"w{i}", "") for i in range(n)]
        ranks = [rng.choice([0, 1, 5, 10, MAX_RANK]) for _ in range(n)]
        overrides = [OverrideRule(f"w{rng.randint(0, 40)}", rng.randint(-5, 40)) for _ in range(rng.randint(0, 4))]
        extras = [Entry(f"x{i}", "", order=rng.randint(0, 9)) for i in range(rng.randint(0, 3))]

        ranked = rank_entries(entries, ranks, overrides=overrides, extras=extras)

        assert [e.order for e in ranked] == list(range(n + len(extras)))
        assert _fronts(ranked[:len(extras)]) == [x.front for x in extras]
