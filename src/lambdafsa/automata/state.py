# Copyright 2024 Matt Chaput. All rights reserved.
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
#    1. Redistributions of source code must retain the above copyright notice,
#       this list of conditions and the following disclaimer.
#
#    2. Redistributions in binary form must reproduce the above copyright
#       notice, this list of conditions and the following disclaimer in the
#       documentation and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY MATT CHAPUT ``AS IS'' AND ANY EXPRESS OR
# IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE IMPLIED WARRANTIES OF
# MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE DISCLAIMED. IN NO
# EVENT SHALL MATT CHAPUT OR CONTRIBUTORS BE LIABLE FOR ANY DIRECT, INDIRECT,
# INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL DAMAGES (INCLUDING, BUT NOT
# LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR SERVICES; LOSS OF USE, DATA,
# OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER CAUSED AND ON ANY THEORY OF
# LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY, OR TORT (INCLUDING
# NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE OF THIS SOFTWARE,
# EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
#
# The views and conclusions contained in the software and documentation are
# those of the authors and should not be interpreted as representing official
# policies, either expressed or implied, of Matt Chaput.


from lambdafsa.automata.base import Determinable, Displayable
from lambdafsa.errors import EmptyCompositionError, InvalidStateError
from lambdafsa.util import labelset, ordered

# Marker constants


class Marker:
    """
    Represents a marker object.

    Markers are distinguished symbols that can never be confused with a
    symbol of the input alphabet, because they compare equal only to
    themselves.

    Attributes:
        name (str): The name of the marker.

    Example:
        >>> marker = Marker("start")
        >>> marker.name
        'start'
        >>> repr(marker)
        '<start>'
    """

    def __init__(self, name):
        self.name = name

    def __repr__(self):
        return f"<{self.name}>"


# The empty (lambda) symbol: a transition on EPSILON is taken without reading
# any input
EPSILON = Marker("EPSILON")


class State(Displayable, Determinable):
    """
    A vertex of an automaton.

    A state is identified by a non-empty set of labels. A state of an
    automaton built by hand has a single label. A *composite* state, made by
    :meth:`compose_state`, has the union of the labels of the states it
    stands for, and represents "all of these are active at once".

    Transitions map a symbol (or :data:`EPSILON`) to a set of destination
    *labels*. They are resolved to states by the owning
    :class:`~lambdafsa.automata.fsa.Automata`. A state never refers to its
    automaton.

    Attributes:
        id (frozenset): The labels identifying this state.
        is_initial (bool): Whether this is the start state.
        is_final (bool): Whether this is an accepting state.

    Example:
        >>> a = State("A", initial=True)
        >>> a.add_transition("0", ["A", "B"])
        >>> sorted(a.get_transition("0"))
        ['A', 'B']
        >>> a.is_deterministic()
        False
    """

    def __init__(self, ids, initial=False, final=False):
        """
        Initializes a new state.

        Args:
            ids: A label or an iterable of labels identifying the state.
            initial (bool, optional): Whether this is the start state.
                Defaults to False.
            final (bool, optional): Whether this is an accepting state.
                Defaults to False.

        Raises:
            InvalidStateError: If ``ids`` is empty.
        """
        self.id = labelset(ids)
        if not self.id:
            raise InvalidStateError("Can't create a state without an id")
        self.is_initial = bool(initial)
        self.is_final = bool(final)
        self._transitions = {}

    def __repr__(self):
        return f"{type(self).__name__}({self.label_string()})"

    def label_string(self):
        """
        Returns the labels of this state as a compact string, e.g. ``"A,B"``.
        """
        return ",".join(str(label) for label in ordered(self.id))

    def to_string(self):
        flags = []
        if self.is_initial:
            flags.append("initial")
        if self.is_final:
            flags.append("final")
        trans = ", ".join(
            f"{symbol!r} -> {{{','.join(str(d) for d in ordered(dests))}}}"
            for symbol, dests in self.transition_map()
        )
        return f"[({self.label_string()}) {' '.join(flags)}] => {{{trans}}}"

    def copy(self):
        """
        Returns an independent copy of this state.

        Changing the transitions of the copy does not affect this state.
        """
        state = State(self.id, self.is_initial, self.is_final)
        for symbol, dests in self._transitions.items():
            state._transitions[symbol] = set(dests)
        return state

    # Transitions

    def get_inputs(self):
        """
        Returns the symbols that have at least one destination.

        Returns:
            frozenset: The symbols, possibly including :data:`EPSILON`.
        """
        return frozenset(self._transitions)

    def transition_map(self):
        """
        Returns the transitions of this state.

        Returns:
            list: ``(symbol, frozenset of labels)`` pairs in the order the
            symbols were first added.
        """
        return [
            (symbol, frozenset(dests)) for symbol, dests in self._transitions.items()
        ]

    def add_transition(self, symbol, dests):
        """
        Adds destinations to the transition on a symbol.

        The new destinations are merged with the existing ones, so adding the
        same destination twice has no further effect.

        Args:
            symbol: The input symbol, or :data:`EPSILON`.
            dests: A label or an iterable of labels.
        """
        dests = labelset(dests)
        if dests:
            self._transitions.setdefault(symbol, set()).update(dests)

    def remove_transition(self, symbol, dests):
        """
        Removes destinations from the transition on a symbol.

        Destinations that are not present are ignored. When no destination is
        left the symbol no longer appears in :meth:`get_inputs`.

        Args:
            symbol: The input symbol, or :data:`EPSILON`.
            dests: A label or an iterable of labels.
        """
        current = self._transitions.get(symbol)
        if current is None:
            return
        current.difference_update(labelset(dests))
        if not current:
            del self._transitions[symbol]

    def get_transition(self, symbol):
        """
        Returns the destination labels for a symbol.

        Args:
            symbol: The input symbol, or :data:`EPSILON`.

        Returns:
            frozenset: The destination labels; empty if there are none.
        """
        return frozenset(self._transitions.get(symbol, ()))

    # Composition

    def compose_state(self, other):
        """
        Returns a new state standing for both this state and ``other``.

        The new state's id is the union of both ids, and it is initial/final
        if either operand is. For each symbol the destinations are the union
        of both operands' destinations, except that epsilon destinations
        which are already part of the new id are dropped: a composite state
        never has an epsilon edge into itself.

        Neither operand is modified.

        Args:
            other (State): The state to merge with this one.

        Returns:
            State: The composite state.
        """
        new_id = self.id | other.id
        state = State(
            new_id,
            self.is_initial or other.is_initial,
            self.is_final or other.is_final,
        )
        for symbol in list(self._transitions) + list(other._transitions):
            if symbol in state._transitions:
                continue
            dests = self.get_transition(symbol) | other.get_transition(symbol)
            if symbol is EPSILON:
                dests = dests - new_id
            state.add_transition(symbol, dests)
        return state

    def compose_states(self, *states):
        """
        Composes this state with each of the given states, left to right.

        With no arguments, returns this state itself.

        Returns:
            State: The composite state.
        """
        result = self
        for state in states:
            result = result.compose_state(state)
        return result

    # Determinism

    def is_deterministic(self):
        """
        Returns True if this is a single-label state with no epsilon
        destinations and at most one destination per symbol.
        """
        if len(self.id) != 1:
            return False
        for symbol, dests in self._transitions.items():
            if symbol is EPSILON:
                if dests:
                    return False
            elif len(dests) > 1:
                return False
        return True


def compose_states(*states):
    """
    Composes one or more states into a single composite state.

    Args:
        *states (State): The states to compose.

    Returns:
        State: The composite of all the given states. If only one state is
        given it is returned as is.

    Raises:
        EmptyCompositionError: If no states are given.

    Example:
        >>> s = compose_states(State("A"), State("B", final=True))
        >>> sorted(s.id), s.is_final
        (['A', 'B'], True)
    """
    if not states:
        raise EmptyCompositionError("Can't compose an empty list of states")
    return states[0].compose_states(*states[1:])
