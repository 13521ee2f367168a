# This source code is part of the dnapack package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for handling packed DNA sequences.

A :class:`Nucleotide` is one of the four unambiguous DNA bases
``A``, ``C``, ``G`` and ``T``.
Each base has a *symbol code*, an integer between 0 and 3, that fits
into two bits:
``A``, ``C``, ``G`` and ``T`` are encoded into 0, 1, 2 and 3,
respectively.

A :class:`PackedSequence` is an immutable succession of nucleotides.
Internally, it is saved as a *NumPy* :class:`ndarray` of unsigned
bytes (*words*), where each word holds the symbol codes of four
consecutive nucleotides.
The first nucleotide of a word occupies the two most significant bits,
the fourth nucleotide the two least significant bits.
If the length of the sequence is not a multiple of four, the unused
bits of the last word are zero.
Compared to a :class:`str`, a :class:`PackedSequence` requires only a
quarter of the memory.

A :class:`PackedSequence` is created either from a string via
:meth:`PackedSequence.parse()` or from an iterable of
:class:`Nucleotide` objects via :meth:`PackedSequence.collect()`.
Parsing a string is all-or-nothing: If the string contains at least one
character that is not a nucleotide, a :class:`ParseSequenceError` is
raised and no sequence is created.
"""

__name__ = "dnapack.sequence"
__author__ = "The dnapack developers"

from .nucleotide import *
from .packed import *
