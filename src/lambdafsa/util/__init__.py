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


from itertools import count

# Sequence algebra


def add_if_absent(seq, item):
    """
    Appends an item to a list unless the list already contains it.

    Args:
        seq (list): The list to modify in place.
        item (object): The item to append.

    Returns:
        list: The same list, for chaining.

    Example:
        >>> add_if_absent(["a", "b"], "b")
        ['a', 'b']
        >>> add_if_absent(["a", "b"], "c")
        ['a', 'b', 'c']
    """
    if item not in seq:
        seq.append(item)
    return seq


def remove_if_present(seq, item):
    """
    Removes the first occurrence of an item from a list, if there is one.

    Args:
        seq (list): The list to modify in place.
        item (object): The item to remove.

    Returns:
        list: The same list, for chaining.
    """
    if item in seq:
        seq.remove(item)
    return seq


# Labels


def labelset(value):
    """Coerces a label or an iterable of labels to a frozenset of labels.

    A string is treated as a single label, so ``labelset("AB")`` is
    ``frozenset({"AB"})`` and not ``frozenset({"A", "B"})``. Any other
    non-iterable value is also treated as a single label.

    >>> sorted(labelset(["A", "B", "A"]))
    ['A', 'B']
    >>> labelset("A")
    frozenset({'A'})
    """

    if isinstance(value, (str, bytes)):
        return frozenset((value,))
    try:
        return frozenset(value)
    except TypeError:
        return frozenset((value,))


def ordered(items):
    """Returns the given labels or symbols as a list in a stable order.

    Labels and symbols may be of mixed, mutually unorderable types, so they
    are ordered by their string form.
    """

    return sorted(items, key=str)


def fresh_names(prefix):
    """
    Yields an endless series of new labels: ``prefix0``, ``prefix1``, ...

    Args:
        prefix (str): The text to put before each number.

    Yields:
        str: The next unused label.

    Example:
        >>> names = fresh_names("q")
        >>> next(names), next(names)
        ('q0', 'q1')
    """
    for n in count():
        yield f"{prefix}{n}"
