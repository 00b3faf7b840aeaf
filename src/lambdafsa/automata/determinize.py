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


"""
Subset construction: converting an automaton with nondeterminism and epsilon
transitions into an equivalent deterministic one.

Each state of the result stands for a set of states of the input that can be
active at the same time. Sets are identified by the frozenset of their
labels, so two composite states reached by different paths are the same
deterministic state whenever they cover the same labels.
"""

from collections import deque

from loguru import logger

from lambdafsa.automata.convert import Conversion
from lambdafsa.automata.fsa import DEFAULT_DETERMINIZED_PREFIX, Automata
from lambdafsa.automata.state import State
from lambdafsa.util import fresh_names, ordered


def determinize(fa, prefix=DEFAULT_DETERMINIZED_PREFIX):
    """
    Converts an automaton to an equivalent deterministic automaton.

    The start state of the result is the epsilon closure of the input's
    initial state. From each composite state, every symbol of the alphabet
    leads to the epsilon closure of all its destinations; a composite whose
    labels have not been seen before gets the next fresh label and is
    explored in turn. A composite is final if any state it covers is final.

    Symbols with no destination get no transition, so the result may be a
    partial DFA: input that runs off it is rejected, as it is by the input.

    At most 2**N composites exist for N input states and each one is explored
    once, so the construction always terminates.

    Args:
        fa (Automata): The automaton to convert. It is not modified.
        prefix (str, optional): Text to start the new labels with. Labels are
            numbered in the order their composites are discovered, so the
            start state is ``prefix + "0"``.

    Returns:
        Conversion: The deterministic automaton, with ``changes`` mapping the
        frozenset of input labels behind each new state to its new label.

    Raises:
        MissingStateError: If the automaton has no initial state or a
            transition leads to an unknown label.

    Example:
        >>> changes, dfa = determinize(nfa)
        >>> dfa.is_deterministic()
        True
    """

    initial = fa.initial_state()
    symbols = ordered(fa.alphabet())
    names = fresh_names(prefix)

    start = fa.get_compose_state_closure(next(iter(initial.id)))
    start_key = frozenset(start.id)
    changes = {start_key: next(names)}
    composites = {start_key: start}
    frontier = deque([start_key])
    edges = []

    while frontier:
        key = frontier.popleft()
        current = composites[key]
        for symbol in symbols:
            target = fa.get_compose_transition(current, symbol)
            if target is None:
                continue
            target_key = frozenset(target.id)
            if target_key not in changes:
                changes[target_key] = next(names)
                composites[target_key] = target
                frontier.append(target_key)
                logger.debug(
                    "New composite {} = {{{}}}",
                    changes[target_key],
                    ",".join(str(label) for label in ordered(target_key)),
                )
            edges.append((changes[key], symbol, changes[target_key]))

    dfa = Automata()
    for key, name in changes.items():
        composite = composites[key]
        dfa.add_state(State(name, initial=key == start_key, final=composite.is_final))
    for src, symbol, dest in edges:
        dfa.add_transition(src, symbol, dest)

    logger.debug("Determinized {} states into {} states", len(fa), len(dfa))
    return Conversion(dfa, changes)
