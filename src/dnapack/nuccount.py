# This source code is part of the dnapack package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Command line program that counts the nucleotides in a DNA sequence.

.. code-block:: console

    $ nuccount --dna ACGTTT
    Input: ACGTTT

    A: 1
    C: 1
    G: 1
    T: 3
"""

__name__ = "dnapack"
__author__ = "The dnapack developers"
__all__ = ["main"]

import argparse
import logging
import sys
from dnapack.sequence.packed import PackedSequence, ParseSequenceError


def main(argv=None):
    """
    Run the ``nuccount`` program.

    Parameters
    ----------
    argv : list of str, optional
        The command line arguments, without the program name.
        By default, the arguments are taken from :data:`sys.argv`.

    Returns
    -------
    exit_code : int
        0 if the nucleotides were counted, 1 if the input is not a
        valid DNA sequence.
    """
    parser = argparse.ArgumentParser(
        prog="nuccount",
        description=(
            "Count the number of occurrences of each nucleotide "
            "in the provided DNA."
        ),
    )
    parser.add_argument(
        "--dna",
        "-d",
        required=True,
        help=(
            "The DNA sequence for which the nucleotides are counted. "
            "It is case insensitive, but only the nucleotides "
            "A, C, G and T are supported."
        ),
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log the processing steps."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s:%(message)s",
    )

    print(f"Input: {args.dna}")
    logging.info(f"Parse sequence of length {len(args.dna)}...")
    try:
        sequence = PackedSequence.parse(args.dna)
    except ParseSequenceError as e:
        print(
            f"error: {e}. Input must consist of nucleotide characters only.",
            file=sys.stderr,
        )
        return 1

    logging.info("Count nucleotides...")
    frequency = sequence.get_symbol_frequency()
    print()
    for nucleotide, count in frequency.items():
        print(f"{nucleotide}: {count}")
    return 0
