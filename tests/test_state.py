import pytest
from lambdafsa.automata import (
    EPSILON,
    EmptyCompositionError,
    InvalidStateError,
    State,
    compose_states,
)


def test_empty_id():
    with pytest.raises(InvalidStateError):
        State([])
    with pytest.raises(InvalidStateError):
        State(set())


def test_string_is_one_label():
    assert State("AB").id == frozenset(["AB"])
    assert State(["A", "B"]).id == frozenset(["A", "B"])
    assert State(7).id == frozenset([7])


def test_flags():
    s = State("A")
    assert not s.is_initial
    assert not s.is_final
    s = State("A", initial=True, final=True)
    assert s.is_initial
    assert s.is_final


def test_add_transition():
    s = State("A")
    assert s.get_transition("0") == frozenset()
    assert s.get_inputs() == frozenset()

    s.add_transition("0", ["A", "B"])
    s.add_transition("0", "C")
    assert s.get_transition("0") == frozenset("ABC")
    s.add_transition("0", ["A", "B"])
    assert s.get_transition("0") == frozenset("ABC")
    assert s.get_inputs() == frozenset(["0"])


def test_remove_transition():
    s = State("A")
    s.add_transition("0", ["A", "B"])
    s.remove_transition("0", ["B", "Z"])
    assert s.get_transition("0") == frozenset(["A"])
    s.remove_transition("1", ["A"])
    assert s.get_inputs() == frozenset(["0"])
    s.remove_transition("0", "A")
    assert s.get_transition("0") == frozenset()
    assert s.get_inputs() == frozenset()


def test_add_then_remove_restores():
    s = State("A")
    s.add_transition("0", ["A"])
    before = s.get_transition("0")
    s.add_transition("0", ["B", "C"])
    s.remove_transition("0", ["B", "C"])
    assert s.get_transition("0") == before

    s.add_transition("1", ["B"])
    s.remove_transition("1", ["B"])
    assert s.get_transition("1") == frozenset()
    assert "1" not in s.get_inputs()


def test_transition_map():
    s = State("A")
    s.add_transition("0", "A")
    s.add_transition(EPSILON, "B")
    assert s.transition_map() == [
        ("0", frozenset(["A"])),
        (EPSILON, frozenset(["B"])),
    ]


def test_compose_state():
    a = State("A", initial=True)
    a.add_transition("0", "A")
    b = State("B", final=True)
    b.add_transition("0", "C")
    b.add_transition("1", "B")

    ab = a.compose_state(b)
    assert ab.id == frozenset("AB")
    assert ab.is_initial
    assert ab.is_final
    assert ab.get_transition("0") == frozenset("AC")
    assert ab.get_transition("1") == frozenset("B")


def test_compose_commutative():
    a = State("A", initial=True)
    a.add_transition("0", ["A", "B"])
    a.add_transition(EPSILON, "C")
    b = State("B", final=True)
    b.add_transition("1", "A")
    b.add_transition(EPSILON, ["A", "D"])

    ab = a.compose_state(b)
    ba = b.compose_state(a)
    assert ab.id == ba.id
    assert ab.is_initial == ba.is_initial
    assert ab.is_final == ba.is_final
    assert ab.get_inputs() == ba.get_inputs()
    for symbol in ab.get_inputs():
        assert ab.get_transition(symbol) == ba.get_transition(symbol)


def test_compose_drops_epsilon_into_itself():
    a = State("A")
    a.add_transition(EPSILON, "B")
    b = State("B")
    b.add_transition(EPSILON, ["A", "C"])
    b.add_transition("0", "A")

    ab = a.compose_state(b)
    assert ab.get_transition(EPSILON) == frozenset(["C"])
    # Non-epsilon self references are kept
    assert ab.get_transition("0") == frozenset(["A"])

    c = State("C")
    abc = ab.compose_state(c)
    assert abc.get_transition(EPSILON) == frozenset()
    assert EPSILON not in abc.get_inputs()


def test_compose_is_pure():
    a = State("A")
    a.add_transition("0", "A")
    b = State("B", final=True)
    b.add_transition("0", "B")

    ab = a.compose_state(b)
    ab.add_transition("1", "A")
    assert a.id == frozenset("A")
    assert not a.is_final
    assert a.get_transition("0") == frozenset("A")
    assert a.get_inputs() == frozenset("0")
    assert b.get_transition("0") == frozenset("B")
    assert b.get_inputs() == frozenset("0")


def test_compose_states():
    a = State("A")
    b = State("B")
    c = State("C", final=True)
    abc = a.compose_states(b, c)
    assert abc.id == frozenset("ABC")
    assert abc.is_final
    assert a.compose_states() is a

    s = compose_states(a, b, c)
    assert s.id == frozenset("ABC")
    assert compose_states(a) is a

    with pytest.raises(EmptyCompositionError):
        compose_states()


def test_is_deterministic():
    s = State("A")
    assert s.is_deterministic()
    s.add_transition("0", "A")
    s.add_transition("1", "B")
    assert s.is_deterministic()

    s.add_transition("0", "B")
    assert not s.is_deterministic()
    s.remove_transition("0", "B")
    assert s.is_deterministic()

    s.add_transition(EPSILON, "B")
    assert not s.is_deterministic()
    s.remove_transition(EPSILON, "B")
    assert s.is_deterministic()

    assert not State(["A", "B"]).is_deterministic()


def test_copy():
    s = State("A", final=True)
    s.add_transition("0", "A")
    c = s.copy()
    assert c is not s
    assert c.id == s.id
    assert c.is_final
    c.add_transition("0", "B")
    assert s.get_transition("0") == frozenset("A")


def test_to_string():
    s = State("A", initial=True, final=True)
    s.add_transition("0", ["B", "A"])
    text = str(s)
    assert text.startswith("[(A) initial final]")
    assert "'0' -> {A,B}" in text
    assert repr(s) == "State(A)"
