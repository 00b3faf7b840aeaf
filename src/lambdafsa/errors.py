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
Exceptions raised by the automata classes.

Every error is raised synchronously by the call that detects it, before that
call has mutated anything.
"""


class AutomataError(Exception):
    """
    Base class for all errors raised by lambdafsa.
    """

    pass


class InvalidStateError(AutomataError, ValueError):
    """
    Raised when a State is built with an empty id, or when a second initial
    state is added to an Automata.
    """

    pass


class DuplicateStateError(AutomataError, ValueError):
    """
    Raised when a state is added to an Automata whose id shares a label with
    a state that is already a member.
    """

    pass


class MissingStateError(AutomataError, KeyError):
    """
    Raised when a label does not resolve to any state of an Automata.

    Attributes:
        label -- the label that could not be resolved
    """

    def __init__(self, label, message=None):
        self.label = label
        if message is None:
            message = f"No state with label {label!r}"
        AutomataError.__init__(self, message)

    def __str__(self):
        # KeyError.__str__ would repr() the message
        return self.args[0]


class EmptyCompositionError(AutomataError, ValueError):
    """
    Raised when composing an empty list of states.
    """

    pass


class NonDeterministicError(AutomataError):
    """
    Raised when an operation that needs a deterministic automaton is given
    a non-deterministic one and was told not to determinize it first.
    """

    pass
