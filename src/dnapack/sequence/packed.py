# This source code is part of the dnapack package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "dnapack.sequence"
__author__ = "The dnapack developers"
__all__ = ["PackedSequence", "ParseSequenceError", "IndexOutOfBoundsError"]

from numbers import Integral
import numpy as np
from dnapack.sequence.nucleotide import Nucleotide, ParseNucleotideError


class PackedSequence(object):
    """
    An immutable DNA sequence, that stores each nucleotide in two bits.

    The symbol codes of the nucleotides are packed into a *NumPy*
    :class:`ndarray` of unsigned bytes (*words*).
    Each word holds four nucleotides, the first one in the most
    significant bits.
    The logical length of the sequence is stored separately, as the
    last word may be only partially filled.

    A :class:`PackedSequence` can be indexed and sliced like a
    :class:`str`.
    Indexing gives a :class:`Nucleotide`, slicing gives a new
    :class:`PackedSequence`.

    Objects of this class are immutable.

    Parameters
    ----------
    sequence : str or iterable object of Nucleotide, optional
        The nucleotides the sequence is created from.
        A :class:`str` is parsed via :meth:`parse()`, any other
        iterable object is consumed via :meth:`collect()`.
        By default the sequence is empty.

    Attributes
    ----------
    code : ndarray, dtype=uint8
        The unpacked symbol codes, one element per nucleotide.
        This is a new array in every access.

    Examples
    --------

    >>> dna = PackedSequence.parse("acgTT")
    >>> print(dna)
    ACGTT
    >>> print(len(dna))
    5
    >>> print(dna.get(1))
    C
    >>> print(dna[-1])
    T
    >>> print(dna.code)
    [0 1 2 3 3]
    >>> print(dna[1:4])
    CGT
    >>> dna == PackedSequence.collect(Nucleotide.from_char(c) for c in "ACGTT")
    True
    >>> try:
    ...    PackedSequence.parse("ACGTTDTT")
    ... except ParseSequenceError as e:
    ...    print(e)
    Symbol 'D' at position 5 is not a nucleotide
    """

    BITS_PER_SYMBOL = 2
    SYMBOLS_PER_WORD = 4
    WORD_DTYPE = np.uint8

    def __init__(self, sequence=()):
        if isinstance(sequence, str):
            code = _encode_text(sequence)
        else:
            code = _encode_nucleotides(sequence)
        self._store(code)

    @classmethod
    def parse(cls, text):
        """
        Create a sequence from a string of nucleotide symbols.

        The string is checked as a whole before the sequence is
        created:
        If any character is not a nucleotide, no sequence is created
        at all.

        Parameters
        ----------
        text : str
            The nucleotide symbols.
            Upper and lower case letters are accepted.

        Returns
        -------
        sequence : PackedSequence
            The sequence, with the same length as `text`.

        Raises
        ------
        ParseSequenceError
            If `text` contains a character that is not one of
            ``A``, ``C``, ``G`` or ``T`` (ignoring case).
            The error refers to the first of such characters.
        """
        if not isinstance(text, str):
            raise TypeError(f"Expected 'str', but got '{type(text).__name__}'")
        return cls(text)

    @classmethod
    def collect(cls, nucleotides):
        """
        Create a sequence from an iterable object of nucleotides.

        The iterable object is consumed completely, hence it must be
        finite.

        Parameters
        ----------
        nucleotides : iterable object of Nucleotide
            The nucleotides, e.g. a list or a generator.

        Returns
        -------
        sequence : PackedSequence
            The sequence, containing the nucleotides in iteration
            order.
        """
        if isinstance(nucleotides, str):
            raise TypeError(
                "Expected an iterable object of 'Nucleotide', "
                "use 'parse()' for strings"
            )
        return cls(nucleotides)

    def get(self, index):
        """
        Get the nucleotide at the given position.

        Parameters
        ----------
        index : int
            The position, between 0 and the sequence length
            (exclusive).
            Unlike the ``[]`` operator, negative values are not
            accepted.

        Returns
        -------
        nucleotide : Nucleotide
            The nucleotide at `index`.

        Raises
        ------
        IndexOutOfBoundsError
            If `index` is not a valid position in this sequence.
        """
        if not isinstance(index, Integral):
            raise TypeError(
                f"Index must be an integer, but got '{type(index).__name__}'"
            )
        if index < 0 or index >= self._length:
            raise IndexOutOfBoundsError(index, self._length)
        word = int(self._words[index // self.SYMBOLS_PER_WORD])
        slot = index % self.SYMBOLS_PER_WORD
        shift = (self.SYMBOLS_PER_WORD - 1 - slot) * self.BITS_PER_SYMBOL
        return Nucleotide.from_code((word >> shift) & _SLOT_MASK)

    @property
    def code(self):
        slots = (self._words[:, np.newaxis] >> _SLOT_SHIFTS) & _SLOT_MASK
        return slots.reshape(-1)[: self._length]

    def get_symbol_frequency(self):
        """
        Count the occurrences of each nucleotide in the sequence.

        Returns
        -------
        frequency : dict of (Nucleotide -> int)
            The number of occurrences for each nucleotide, in the order
            ``A``, ``C``, ``G``, ``T``.
            Nucleotides that do not occur have a count of 0.

        Examples
        --------

        >>> dna = PackedSequence("ACGTTT")
        >>> for nucleotide, count in dna.get_symbol_frequency().items():
        ...     print(f"{nucleotide}: {count}")
        A: 1
        C: 1
        G: 1
        T: 3
        """
        counts = np.bincount(self.code, minlength=len(Nucleotide))
        return {nuc: counts[nuc.to_code()].item() for nuc in Nucleotide}

    def _store(self, code):
        self._length = len(code)
        self._words = _pack(code)
        self._words.flags.writeable = False

    @classmethod
    def _from_code(cls, code):
        sequence = cls.__new__(cls)
        sequence._store(code)
        return sequence

    def __getitem__(self, index):
        if isinstance(index, Integral):
            position = index + self._length if index < 0 else index
            if position < 0:
                raise IndexOutOfBoundsError(index, self._length)
            return self.get(position)
        elif isinstance(index, slice):
            return self._from_code(self.code[index])
        else:
            raise TypeError(
                f"Index must be an integer or a slice, "
                f"but got '{type(index).__name__}'"
            )

    def __len__(self):
        return self._length

    def __iter__(self):
        for code in self.code.tolist():
            yield Nucleotide.from_code(code)

    def __contains__(self, item):
        if not isinstance(item, Nucleotide):
            return False
        return bool(np.any(self.code == item.to_code()))

    def __eq__(self, item):
        if item is self:
            return True
        if not isinstance(item, PackedSequence):
            return False
        return self._length == item._length and np.array_equal(
            self._words, item._words
        )

    def __hash__(self):
        return hash((self._length, self._words.tobytes()))

    def __str__(self):
        return _code_to_char[self.code].tobytes().decode("ASCII")

    def __repr__(self):
        """Represent PackedSequence as a string for debugging."""
        return f'PackedSequence("{self}")'


class ParseSequenceError(ValueError):
    """
    This exception is raised, when a string cannot be parsed into a
    :class:`PackedSequence`, because it contains a character that is
    not a nucleotide.

    The :class:`ParseNucleotideError` for the offending character is
    attached as ``__cause__``.

    Attributes
    ----------
    symbol : str
        The first offending character.
    position : int
        The position of `symbol` in the parsed string.
    """

    def __init__(self, symbol, position):
        super().__init__(
            f"Symbol {repr(symbol)} at position {position:d} is not a nucleotide"
        )
        self.symbol = symbol
        self.position = position


class IndexOutOfBoundsError(IndexError):
    """
    This exception is raised, when a :class:`PackedSequence` is
    accessed at a position outside of the sequence.

    Attributes
    ----------
    index : int
        The rejected index.
    length : int
        The length of the accessed sequence.
    """

    def __init__(self, index, length):
        super().__init__(
            f"Index {index:d} is out of bounds for sequence of length {length:d}"
        )
        self.index = index
        self.length = length


_SLOT_MASK = (1 << PackedSequence.BITS_PER_SYMBOL) - 1
# Bit shift of each slot in a word, the first slot is the most
# significant one
_SLOT_SHIFTS = (
    np.arange(PackedSequence.SYMBOLS_PER_WORD - 1, -1, -1, dtype=np.uint8)
    * PackedSequence.BITS_PER_SYMBOL
)
# Marks characters in the lookup table that are not nucleotides
_INVALID_CODE = np.iinfo(np.uint8).max
# Lookup table from the ASCII value of a character to its symbol code
_char_to_code = np.full(128, _INVALID_CODE, dtype=np.uint8)
for _nuc in Nucleotide:
    _char_to_code[ord(_nuc.to_char())] = _nuc.to_code()
    _char_to_code[ord(_nuc.to_char().lower())] = _nuc.to_code()
del _nuc
_code_to_char = np.array([nuc.to_char() for nuc in Nucleotide], dtype="|S1")


def _encode_text(text):
    """
    Encode a string into symbol codes, or raise a
    :class:`ParseSequenceError` at the first invalid character.
    """
    # UTF-32 gives one element per character, independent of its width
    code_points = np.frombuffer(
        text.encode("utf-32-le", errors="surrogatepass"), dtype="<u4"
    )
    code = np.full(len(code_points), _INVALID_CODE, dtype=np.uint8)
    is_ascii = code_points < len(_char_to_code)
    code[is_ascii] = _char_to_code[code_points[is_ascii]]
    invalid_positions = np.flatnonzero(code == _INVALID_CODE)
    if len(invalid_positions) > 0:
        position = invalid_positions[0].item()
        symbol = text[position]
        raise ParseSequenceError(symbol, position) from ParseNucleotideError(symbol)
    return code


def _encode_nucleotides(nucleotides):
    code = []
    for nucleotide in nucleotides:
        if not isinstance(nucleotide, Nucleotide):
            raise TypeError(
                f"Expected 'Nucleotide', but got '{type(nucleotide).__name__}'"
            )
        code.append(nucleotide.to_code())
    return np.array(code, dtype=np.uint8)


def _pack(code):
    """
    Pack symbol codes into words, with the unused slots of the last
    word set to zero.
    """
    n_words = -(-len(code) // PackedSequence.SYMBOLS_PER_WORD)
    slots = np.zeros(
        n_words * PackedSequence.SYMBOLS_PER_WORD, dtype=PackedSequence.WORD_DTYPE
    )
    slots[: len(code)] = code
    slots = slots.reshape(-1, PackedSequence.SYMBOLS_PER_WORD)
    return np.bitwise_or.reduce(slots << _SLOT_SHIFTS, axis=1).astype(
        PackedSequence.WORD_DTYPE, copy=False
    )
