# This source code is part of the dnapack package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "dnapack.sequence"
__author__ = "The dnapack developers"
__all__ = ["Nucleotide", "ParseNucleotideError"]

import enum
from numbers import Integral


class Nucleotide(enum.IntEnum):
    """
    An enum for the four unambiguous DNA nucleotides.

    The value of each member is its *symbol code*, the 2-bit integer
    the nucleotide is represented with in a :class:`PackedSequence`.

    Examples
    --------

    >>> print(Nucleotide.from_char("g"))
    G
    >>> print(Nucleotide.G.to_code())
    2
    >>> print(Nucleotide.from_code(3))
    T
    >>> try:
    ...    Nucleotide.from_char("N")
    ... except ParseNucleotideError as e:
    ...    print(e)
    Symbol 'N' is not a nucleotide
    """

    A = 0b00
    C = 0b01
    G = 0b10
    T = 0b11

    @staticmethod
    def from_char(char):
        """
        Get the nucleotide from its one-letter symbol.

        Parameters
        ----------
        char : str
            The symbol, either upper or lower case.

        Returns
        -------
        nucleotide : Nucleotide
            The corresponding nucleotide.

        Raises
        ------
        ParseNucleotideError
            If `char` is not one of ``A``, ``C``, ``G`` or ``T``
            (ignoring case).
        """
        try:
            return _char_to_nuc[char]
        except (KeyError, TypeError):
            raise ParseNucleotideError(char)

    @staticmethod
    def from_code(code):
        """
        Get the nucleotide from its symbol code.

        Parameters
        ----------
        code : int
            The symbol code, an integer between 0 and 3.

        Returns
        -------
        nucleotide : Nucleotide
            The corresponding nucleotide.

        Raises
        ------
        ParseNucleotideError
            If `code` is not a valid symbol code.
        """
        if not isinstance(code, Integral) or code < 0 or code >= len(_nucleotides):
            raise ParseNucleotideError(code)
        return _nucleotides[code]

    def to_code(self):
        """
        Get the symbol code of this nucleotide.

        Returns
        -------
        code : int
            The symbol code, an integer between 0 and 3.
        """
        return int(self.value)

    def to_char(self):
        """
        Get the upper case one-letter symbol of this nucleotide.

        Returns
        -------
        char : str
            The symbol.
        """
        return self.name

    def __str__(self):
        return self.name

    def __format__(self, format_spec):
        # 'IntEnum' would format the symbol code otherwise
        return format(self.name, format_spec)

    def __repr__(self):
        """Represent Nucleotide as a string for debugging."""
        return f"Nucleotide.{self.name}"


class ParseNucleotideError(ValueError):
    """
    This exception is raised, when a symbol or a symbol code does not
    correspond to a :class:`Nucleotide`.

    Parameters
    ----------
    value : object
        The rejected symbol or symbol code.

    Attributes
    ----------
    value : object
        The rejected symbol or symbol code.
    """

    def __init__(self, value):
        if isinstance(value, str):
            message = f"Symbol {repr(value)} is not a nucleotide"
        else:
            message = f"{repr(value)} is not a valid nucleotide code"
        super().__init__(message)
        self.value = value


_nucleotides = tuple(Nucleotide)
_char_to_nuc = {}
for _nuc in _nucleotides:
    _char_to_nuc[_nuc.name] = _nuc
    _char_to_nuc[_nuc.name.lower()] = _nuc
del _nuc
