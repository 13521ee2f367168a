# This source code is part of the dnapack package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *dnapack*.
It provides a memory efficient representation of DNA sequences, where
each nucleotide occupies only two bits.
The actual functionality lives in the :mod:`dnapack.sequence`
subpackage, the :mod:`dnapack.nuccount` module provides a small
command line program on top of it.
"""

__version__ = "0.1.0"
__name__ = "dnapack"
__author__ = "The dnapack developers"
