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


from cached_property import cached_property


class Conversion:
    """
    The result of rebuilding an automaton, e.g. by determinizing or
    minimizing it.

    Attributes:
        automata (Automata): The newly built automaton.
        changes (dict): Maps each frozenset of labels of the automaton that
            was converted to the single fresh label that replaced it.
        previous (Conversion): The conversion whose result was the input of
            this one, or None if this conversion started from the caller's
            automaton.

    A conversion unpacks like a ``(changes, automata)`` pair::

        changes, dfa = nfa.make_deterministic()
    """

    def __init__(self, automata, changes, previous=None):
        self.automata = automata
        self.changes = changes
        self.previous = previous

    def __repr__(self):
        return f"<{type(self).__name__} {len(self.changes)} states>"

    def __iter__(self):
        yield self.changes
        yield self.automata

    @cached_property
    def origins(self):
        """
        Maps each label of the new automaton to the frozenset of labels, in
        the *first* automaton of the conversion chain, that it stands for.
        """

        if self.previous is None:
            return {name: ids for ids, name in self.changes.items()}

        earlier = self.previous.origins
        result = {}
        for ids, name in self.changes.items():
            merged = frozenset()
            for label in ids:
                merged |= earlier[label]
            result[name] = merged
        return result
