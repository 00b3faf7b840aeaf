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
Finite automata with epsilon transitions, subset construction and
minimization.

Log messages go through loguru and are disabled by default. Call
``logger.enable("lambdafsa")`` to see them.
"""

from loguru import logger

from lambdafsa.automata.base import Determinable, Displayable
from lambdafsa.automata.convert import Conversion
from lambdafsa.automata.determinize import determinize
from lambdafsa.automata.fsa import (
    DEFAULT_DETERMINIZED_PREFIX,
    DEFAULT_MINIMIZED_PREFIX,
    Automata,
)
from lambdafsa.automata.minimize import live_states, minimize, reachable_states
from lambdafsa.automata.state import EPSILON, Marker, State, compose_states
from lambdafsa.errors import (
    AutomataError,
    DuplicateStateError,
    EmptyCompositionError,
    InvalidStateError,
    MissingStateError,
    NonDeterministicError,
)

logger.disable("lambdafsa")
