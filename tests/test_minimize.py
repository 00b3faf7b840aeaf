from itertools import product

import pytest
from lambdafsa.automata import (
    EPSILON,
    Automata,
    MissingStateError,
    NonDeterministicError,
    State,
    live_states,
    minimize,
    reachable_states,
)


def words(alphabet, maxlen):
    for n in range(maxlen + 1):
        for word in product(alphabet, repeat=n):
            yield "".join(word)


def dfa(initial, finals, edges, others=()):
    labels = [initial] + [s for s in finals if s != initial] + list(others)
    fa = Automata(
        *(State(label, label == initial, label in finals) for label in labels)
    )
    for src, symbol, dest in edges:
        fa.add_transition(src, symbol, dest)
    return fa


def nonempty_dfa():
    # B and C are equivalent
    return dfa(
        "A",
        ["B", "C"],
        [
            ("A", "a", "B"),
            ("A", "b", "C"),
            ("B", "a", "B"),
            ("B", "b", "C"),
            ("C", "a", "B"),
            ("C", "b", "C"),
        ],
    )


def even_ones_dfa():
    # Counts 1s modulo 4, but only parity matters
    edges = []
    for src, dest in (("E1", "O1"), ("O1", "E2"), ("E2", "O2"), ("O2", "E1")):
        edges.append((src, "1", dest))
        edges.append((src, "0", src))
    return dfa("E1", ["E1", "E2"], edges, others=["O1", "O2"])


def chain_dfa():
    # Accepts aa, aaa, ...; already minimal
    return dfa(
        "A",
        ["C"],
        [("A", "a", "B"), ("B", "a", "C"), ("C", "a", "C")],
        others=["B"],
    )


def zero_one_nfa():
    fa = Automata(State("A", initial=True), State("B", final=True))
    fa.add_transition("A", EPSILON, "B")
    fa.add_transition("A", "0", "A")
    fa.add_transition("B", "1", "B")
    return fa


def test_merge_equivalent():
    fa = nonempty_dfa()
    changes, small = fa.make_minimum()
    assert len(small) == 2
    assert changes == {frozenset("A"): "m0", frozenset("BC"): "m1"}

    m0 = small.get_state("m0")
    m1 = small.get_state("m1")
    assert m0.is_initial and not m0.is_final
    assert m1.is_final and not m1.is_initial
    assert m0.get_transition("a") == frozenset(["m1"])
    assert m0.get_transition("b") == frozenset(["m1"])
    assert m1.get_transition("a") == frozenset(["m1"])
    assert m1.get_transition("b") == frozenset(["m1"])
    assert small.is_deterministic()


def test_merge_parity():
    fa = even_ones_dfa()
    changes, small = fa.make_minimum()
    assert len(small) == 2
    assert changes == {frozenset(["E1", "E2"]): "m0", frozenset(["O1", "O2"]): "m1"}
    for word in words("01", 6):
        assert small.test_input(word) == (word.count("1") % 2 == 0), word


def test_refinement_splits():
    fa = chain_dfa()
    changes, small = fa.make_minimum()
    assert len(small) == 3
    assert set(changes) == {frozenset("A"), frozenset("B"), frozenset("C")}
    assert changes[frozenset("A")] == "m0"
    for word in words("a", 5):
        assert small.test_input(word) == (len(word) >= 2), word


def test_unreachable_dropped():
    fa = nonempty_dfa()
    fa.add_state(State("D", final=True))
    fa.add_transition("D", "a", "A")
    assert [s.id for s in reachable_states(fa)] == [
        frozenset("A"),
        frozenset("B"),
        frozenset("C"),
    ]
    changes, small = fa.make_minimum()
    assert len(small) == 2
    assert all("D" not in ids for ids in changes)


@pytest.mark.parametrize(
    "make, alphabet",
    [
        (nonempty_dfa, "ab"),
        (even_ones_dfa, "01"),
        (chain_dfa, "a"),
    ],
)
def test_preserves_language(make, alphabet):
    fa = make()
    small = fa.make_minimum().automata
    assert len(small) <= len(fa)
    assert small.is_deterministic()
    for word in words(alphabet, 6):
        assert small.test_input(word) == fa.test_input(word), word


def test_minimum_of_determinized():
    nfa = zero_one_nfa()
    det = nfa.make_deterministic().automata
    small = det.make_minimum().automata
    assert len(small) <= len(det)
    for word in words("01", 6):
        assert small.test_input(word) == nfa.test_input(word), word


def test_auto_determinize():
    nfa = zero_one_nfa()
    conv = nfa.make_minimum()
    assert conv.previous is not None
    assert conv.previous.changes == {frozenset("AB"): "q0", frozenset("B"): "q1"}
    assert conv.changes == {frozenset(["q0"]): "m0", frozenset(["q1"]): "m1"}
    assert conv.origins == {"m0": frozenset("AB"), "m1": frozenset("B")}
    for word in words("01", 6):
        assert conv.automata.test_input(word) == nfa.test_input(word), word


def test_strict_mode():
    with pytest.raises(NonDeterministicError):
        zero_one_nfa().make_minimum(determinize=False)
    with pytest.raises(NonDeterministicError):
        minimize(zero_one_nfa(), determinize=False)

    conv = nonempty_dfa().make_minimum(determinize=False)
    assert conv.previous is None
    assert len(conv.automata) == 2


def test_input_unchanged():
    fa = nonempty_dfa()
    before = [(s.id, s.transition_map()) for s in fa]
    fa.make_minimum()
    assert [(s.id, s.transition_map()) for s in fa] == before
    assert len(fa) == 3


def test_prefix():
    changes, small = nonempty_dfa().make_minimum(prefix="S")
    assert sorted(changes.values()) == ["S0", "S1"]
    assert small.initial_state().id == frozenset(["S0"])


def test_idempotent():
    small = even_ones_dfa().make_minimum().automata
    again = small.make_minimum().automata
    assert len(again) == len(small)


def trap_dfa():
    # Accepts "0" and "1"; C moves into the trap state D where B has no edge
    return dfa(
        "A",
        ["B", "C"],
        [
            ("A", "0", "B"),
            ("A", "1", "C"),
            ("C", "0", "D"),
            ("D", "0", "D"),
            ("D", "1", "D"),
        ],
        others=["D"],
    )


def test_live_states():
    fa = trap_dfa()
    assert [s.id for s in live_states(fa.states)] == [
        frozenset("A"),
        frozenset("B"),
        frozenset("C"),
    ]


def test_trap_state_equals_missing_transition():
    fa = trap_dfa()
    assert fa.is_deterministic()
    changes, small = fa.make_minimum()
    assert len(small) == 2
    assert changes == {frozenset("A"): "m0", frozenset("BC"): "m1"}
    assert small.get_state("m1").get_inputs() == frozenset()
    for word in words("01", 4):
        assert small.test_input(word) == (word in ("0", "1")), word


def test_nothing_accepted():
    fa = dfa("A", [], [("A", "0", "B"), ("B", "0", "B"), ("B", "1", "A")], ["B"])
    changes, small = fa.make_minimum()
    assert len(small) == 1
    assert changes == {frozenset("A"): "m0"}
    m0 = small.get_state("m0")
    assert m0.is_initial and not m0.is_final
    assert m0.get_inputs() == frozenset()
    for word in words("01", 3):
        assert not small.test_input(word), word


def test_dangling_label():
    fa = Automata(State("A", initial=True, final=True))
    fa.add_transition("A", "0", "Z")
    assert fa.is_deterministic()
    with pytest.raises(MissingStateError):
        fa.make_minimum()
