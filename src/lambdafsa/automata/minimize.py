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
Minimization of deterministic automata by partition refinement.

States are first split into final and non-final blocks. A block is then split
whenever two of its states move, on some symbol, into different blocks. When no block splits any more,
the states in each block accept exactly the same futures and are merged.

Dead states, from which no final state can be reached, are dropped before
partitioning, so a move into one and a missing transition are the same thing.
"""

from loguru import logger

from lambdafsa.automata.convert import Conversion
from lambdafsa.automata.determinize import determinize as subset_construction
from lambdafsa.automata.fsa import DEFAULT_MINIMIZED_PREFIX, Automata
from lambdafsa.automata.state import State, compose_states
from lambdafsa.errors import NonDeterministicError
from lambdafsa.util import fresh_names, ordered


def reachable_states(fa):
    """
    Returns the states that can be reached from the initial state of an
    automaton, including the initial state.

    Args:
        fa (Automata): The automaton.

    Returns:
        list: The reachable states, in the automaton's own order.
    """

    initial = fa.initial_state()
    seen = {id(initial)}
    stack = [initial]
    while stack:
        state = stack.pop()
        for symbol in state.get_inputs():
            for dest in fa.get_transition(next(iter(state.id)), symbol):
                if id(dest) not in seen:
                    seen.add(id(dest))
                    stack.append(dest)
    return [state for state in fa.states if id(state) in seen]


def live_states(states):
    """
    Returns the states from which some final state can be reached.

    Args:
        states (list): The states to check. They must include every
            destination of every state in the list.

    Returns:
        list: The live states, in the order given.
    """

    live = set()
    for state in states:
        if state.is_final:
            live.update(state.id)

    changed = True
    while changed:
        changed = False
        for state in states:
            if not live.isdisjoint(state.id):
                continue
            for symbol in state.get_inputs():
                if not live.isdisjoint(state.get_transition(symbol)):
                    live.update(state.id)
                    changed = True
                    break
    return [state for state in states if not live.isdisjoint(state.id)]


def _partition(states, symbols):
    finals = [state for state in states if state.is_final]
    others = [state for state in states if not state.is_final]
    parts = [part for part in (finals, others) if part]

    rounds = 0
    while True:
        rounds += 1
        block_of = {}
        for n, part in enumerate(parts):
            for state in part:
                for label in state.id:
                    block_of[label] = n

        # Missing transitions and moves into dropped dead states map to None
        def target_block(state, symbol):
            for dest in state.get_transition(symbol):
                return block_of.get(dest)
            return None

        refined = []
        for part in parts:
            groups = {}
            for state in part:
                signature = tuple(target_block(state, symbol) for symbol in symbols)
                groups.setdefault(signature, []).append(state)
            refined.extend(groups.values())

        logger.debug(
            "Refinement round {}: {} -> {} blocks", rounds, len(parts), len(refined)
        )
        if len(refined) == len(parts):
            return parts
        parts = refined


def minimize(fa, prefix=DEFAULT_MINIMIZED_PREFIX, determinize=True):
    """
    Returns the deterministic automaton with the fewest states that accepts
    the same input as ``fa``.

    The steps are:

    1. Determinize ``fa`` if it is not deterministic (or refuse, if
       ``determinize`` is False).
    2. Drop states that can't be reached from the initial state, and dead
       states: non-final states from which no final state can be reached.
       Transitions into dead states are dropped too, so the result may be a
       partial DFA.
    3. Partition the remaining states into equivalence blocks.
    4. Build one new state per block. Its flags come from composing the
       block's members, and its transitions are remapped onto the new
       labels.

    Args:
        fa (Automata): The automaton to minimize. It is not modified.
        prefix (str, optional): Text to start the new labels with. The block
            holding the initial state is ``prefix + "0"``; the others follow
            the order of their first member in ``fa``.
        determinize (bool, optional): Whether to determinize a
            non-deterministic automaton first. Defaults to True.

    Returns:
        Conversion: The minimal automaton, with ``changes`` mapping the
        frozenset of labels in each block to its new label. If ``fa`` had to
        be determinized, the labels are those of the determinized automaton,
        ``previous`` is the determinizing conversion, and ``origins`` leads
        back to the labels of ``fa``.

    Raises:
        NonDeterministicError: If ``fa`` is not deterministic and
            ``determinize`` is False.
        MissingStateError: If the automaton has no initial state or a
            transition leads to an unknown label.
    """

    previous = None
    if not fa.is_deterministic():
        if not determinize:
            raise NonDeterministicError(f"Can't minimize non-deterministic {fa!r}")
        logger.debug("Determinizing {!r} before minimizing", fa)
        previous = subset_construction(fa)
        fa = previous.automata

    initial = fa.initial_state()
    states = reachable_states(fa)
    live = live_states(states)
    if initial not in live:
        # Nothing is accepted; the initial state is kept on its own
        live = [initial]
    logger.debug("Dropped {} dead states", len(states) - len(live))
    symbols = ordered(fa.alphabet())
    parts = _partition(live, symbols)

    position = {id(state): n for n, state in enumerate(fa.states)}
    parts.sort(
        key=lambda part: (
            not any(state.is_initial for state in part),
            min(position[id(state)] for state in part),
        )
    )

    names = fresh_names(prefix)
    changes = {}
    renamed = {}
    minimal = Automata()
    for part in parts:
        composite = compose_states(*part)
        name = next(names)
        changes[frozenset(composite.id)] = name
        for label in composite.id:
            renamed[label] = name
        minimal.add_state(State(name, composite.is_initial, composite.is_final))

    # Every member of a block moves into the same blocks, so any one of them
    # gives the block's transitions
    for part in parts:
        src = renamed[next(iter(part[0].id))]
        for symbol, dests in part[0].transition_map():
            targets = {renamed[dest] for dest in dests if dest in renamed}
            minimal.add_transition(src, symbol, targets)

    logger.debug("Minimized {} states into {} states", len(fa), len(minimal))
    return Conversion(minimal, changes, previous)
