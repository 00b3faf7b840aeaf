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


import sys

from lambdafsa.automata.base import Determinable, Displayable
from lambdafsa.automata.state import EPSILON, State, compose_states
from lambdafsa.errors import DuplicateStateError, InvalidStateError, MissingStateError
from lambdafsa.util import add_if_absent, labelset, ordered, remove_if_present

DEFAULT_DETERMINIZED_PREFIX = "q"
DEFAULT_MINIMIZED_PREFIX = "m"


class Automata(Displayable, Determinable):
    """
    A finite automaton, deterministic or not, made of :class:`State` objects.

    The automaton is an ordered list of states with non-overlapping ids.
    Transitions are stored on the states as destination *labels* and are
    resolved here with :meth:`get_state`. A destination label that does not
    belong to any state is only an error when it is resolved.

    Attributes:
        states (list): The member states, in insertion order. Use
            :meth:`add_state` and :meth:`remove_state` to change it.

    Example:
        >>> a = State("A", initial=True)
        >>> b = State("B", final=True)
        >>> fa = Automata(a, b)
        >>> fa.add_transition("A", EPSILON, "B")
        >>> fa.add_transition("A", "0", "A")
        >>> fa.add_transition("B", "1", "B")
        >>> fa.test_input("0011")
        True
        >>> fa.test_input("10")
        False
    """

    def __init__(self, *states):
        """
        Initializes an automaton with the given states.

        Args:
            *states (State): The initial members, added with
                :meth:`add_state`.
        """
        self.states = []
        for state in states:
            self.add_state(state)

    def __len__(self):
        return len(self.states)

    def __iter__(self):
        return iter(self.states)

    def __contains__(self, label):
        return any(label in state.id for state in self.states)

    def __repr__(self):
        return f"<{type(self).__name__} {len(self.states)} states>"

    def to_string(self):
        return "\n".join(state.to_string() for state in self.states)

    def dump(self, stream=sys.stdout):
        """
        Prints a textual representation of the automaton to the specified
        stream.

        The initial state is marked with ``@`` and destinations that are
        final states are marked with ``||``.

        Args:
            stream (file-like object, optional): The stream to print the
                representation to. Defaults to sys.stdout.

        Example:
            >>> fa.dump()
            @ A
               <EPSILON> -> B||
               '0' -> A
              B
               '1' -> B||
        """
        for state in self.states:
            beg = "@" if state.is_initial else " "
            print(beg, state.label_string(), file=stream)
            for symbol, dests in state.transition_map():
                names = []
                for dest in ordered(dests):
                    end = "||" if self._is_final_label(dest) else ""
                    names.append(f"{dest}{end}")
                print("  ", repr(symbol), "->", ",".join(names), file=stream)

    def _is_final_label(self, label):
        for state in self.states:
            if label in state.id:
                return state.is_final
        return False

    def copy(self):
        """
        Returns a copy of this automaton whose states are copies of this
        automaton's states.
        """
        return type(self)(*(state.copy() for state in self.states))

    # Membership

    def add_state(self, state):
        """
        Adds a state to the automaton.

        Adding a state that is already a member has no effect.

        Args:
            state (State): The state to add.

        Raises:
            DuplicateStateError: If the state's id shares a label with a
                member state.
            InvalidStateError: If the state is initial and the automaton
                already has an initial state.
        """
        if state in self.states:
            return
        for other in self.states:
            shared = other.id & state.id
            if shared:
                raise DuplicateStateError(
                    f"Label(s) {ordered(shared)!r} already belong to {other!r}"
                )
            if state.is_initial and other.is_initial:
                raise InvalidStateError(
                    f"Can't add initial state {state!r}: {other!r} is already initial"
                )
        add_if_absent(self.states, state)

    def remove_state(self, label):
        """
        Removes the state whose id contains a label.

        Args:
            label: A label of the state to remove.

        Returns:
            State: The removed state, or None if no state has the label.
        """
        for state in self.states:
            if label in state.id:
                remove_if_present(self.states, state)
                return state
        return None

    def get_state(self, label):
        """
        Returns the state whose id contains a label.

        Args:
            label: The label to look up.

        Returns:
            State: The matching state.

        Raises:
            MissingStateError: If no state has the label.
        """
        for state in self.states:
            if label in state.id:
                return state
        raise MissingStateError(label)

    def initial_state(self):
        """
        Returns the initial state.

        Raises:
            MissingStateError: If the automaton has no initial state.
        """
        for state in self.states:
            if state.is_initial:
                return state
        raise MissingStateError(None, "Automata has no initial state")

    def alphabet(self):
        """
        Returns every symbol, except :data:`EPSILON`, that some state has a
        transition on.

        Returns:
            frozenset: The input symbols.
        """
        symbols = set()
        for state in self.states:
            symbols.update(state.get_inputs())
        symbols.discard(EPSILON)
        return frozenset(symbols)

    def _states_for(self, labels):
        # Resolves labels to member states, without duplicates, in a stable
        # order
        states = []
        for label in ordered(labels):
            add_if_absent(states, self.get_state(label))
        return states

    @staticmethod
    def _compose(states):
        composite = compose_states(*states)
        # A lone state composes to itself; it must not alias a member
        if composite is states[0]:
            composite = composite.copy()
        return composite

    # Transitions

    def add_transition(self, src, symbol, dests):
        """
        Adds destinations to the transition of the state labelled ``src``.

        Args:
            src: A label of the source state.
            symbol: The input symbol, or :data:`EPSILON`.
            dests: A label or an iterable of labels.

        Raises:
            MissingStateError: If ``src`` does not resolve to a state.
        """
        self.get_state(src).add_transition(symbol, dests)

    def remove_transition(self, src, symbol, dests):
        """
        Removes destinations from the transition of the state labelled
        ``src``.

        Raises:
            MissingStateError: If ``src`` does not resolve to a state.
        """
        self.get_state(src).remove_transition(symbol, dests)

    def get_transition(self, src, symbol):
        """
        Returns the states the state labelled ``src`` moves to on a symbol,
        without following any epsilon transitions.

        Args:
            src: A label of the source state.
            symbol: The input symbol, or :data:`EPSILON`.

        Returns:
            list: The destination states; empty if there are none.

        Raises:
            MissingStateError: If ``src`` or one of its destinations does not
                resolve to a state.
        """
        return self._states_for(self.get_state(src).get_transition(symbol))

    def get_compose_transition(self, src, symbol):
        """
        Moves on a symbol and then follows epsilon transitions, returning
        everything reached as one composite state.

        Args:
            src: A label of the source state, or a (possibly composite)
                :class:`State` to move from.
            symbol: The input symbol.

        Returns:
            State: The composite of the epsilon closure of all destinations,
            or None if there is no transition on ``symbol``.

        Raises:
            MissingStateError: If a label does not resolve to a state.
        """
        state = src if isinstance(src, State) else self.get_state(src)
        dests = state.get_transition(symbol)
        if not dests:
            return None
        return self._compose(self._states_for(self._closure_labels(dests)))

    # Closure

    def _closure_labels(self, labels):
        # Worklist search along epsilon transitions. Each label is expanded at
        # most once, so this ends after at most one pass over all labels.
        seen = set()
        stack = list(labelset(labels))
        while stack:
            label = stack.pop()
            if label in seen:
                continue
            seen.add(label)
            for dest in self.get_state(label).get_transition(EPSILON):
                if dest not in seen:
                    stack.append(dest)
        return seen

    def get_state_closure(self, label):
        """
        Returns the epsilon closure of a state: every state reachable from it
        through zero or more epsilon transitions, including itself.

        Args:
            label: A label of the starting state.

        Returns:
            list: The states in the closure.

        Raises:
            MissingStateError: If ``label`` or a label reached from it does
                not resolve to a state.
        """
        return self._states_for(self._closure_labels(label))

    def get_compose_state_closure(self, label):
        """
        Returns the epsilon closure of a state merged into a single composite
        state.

        Args:
            label: A label of the starting state.

        Returns:
            State: The composite state.
        """
        return self._compose(self.get_state_closure(label))

    # Running

    def test_input(self, symbols):
        """
        Returns True if the automaton accepts a sequence of symbols.

        Args:
            symbols: An iterable of input symbols. A string is read one
                character at a time.

        Returns:
            bool: True if the input is accepted, False otherwise.

        Raises:
            MissingStateError: If the automaton has no initial state or a
                transition leads to an unknown label.
        """
        initial = self.initial_state()
        current = self._compose(self._states_for(self._closure_labels(initial.id)))
        for symbol in symbols:
            current = self.get_compose_transition(current, symbol)
            if current is None:
                return False
        return current.is_final

    # Determinism

    def is_deterministic(self):
        """
        Returns True if every state is deterministic and exactly one state is
        initial.
        """
        initials = 0
        for state in self.states:
            if not state.is_deterministic():
                return False
            if state.is_initial:
                initials += 1
        return initials == 1

    # Conversions

    def make_deterministic(self, prefix=DEFAULT_DETERMINIZED_PREFIX):
        """
        Returns an equivalent deterministic automaton built by subset
        construction. This automaton is not modified.

        Args:
            prefix (str, optional): Text to start the new state labels with.

        Returns:
            Conversion: The new automaton and the mapping from sets of this
            automaton's labels to new labels.
        """
        from lambdafsa.automata.determinize import determinize

        return determinize(self, prefix=prefix)

    def make_minimum(self, prefix=DEFAULT_MINIMIZED_PREFIX, determinize=True):
        """
        Returns an equivalent deterministic automaton with the fewest states.
        This automaton is not modified.

        Args:
            prefix (str, optional): Text to start the new state labels with.
            determinize (bool, optional): If True (the default), a
                non-deterministic automaton is determinized first. If False,
                a non-deterministic automaton raises
                :class:`~lambdafsa.errors.NonDeterministicError`.

        Returns:
            Conversion: The minimal automaton and the mapping from blocks of
            equivalent labels to new labels.
        """
        from lambdafsa.automata.minimize import minimize

        return minimize(self, prefix=prefix, determinize=determinize)
