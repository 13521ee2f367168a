# This source code is part of the dnapack package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import pytest
from dnapack.sequence import Nucleotide, PackedSequence


@pytest.mark.parametrize(
    "repr_object",
    [
        Nucleotide.A,
        Nucleotide.T,
        PackedSequence("AACTGCTA"),
        PackedSequence("acg"),
        PackedSequence(),
        PackedSequence.collect([Nucleotide.G, Nucleotide.C]),
    ],
)
def test_repr(repr_object):
    assert eval(repr(repr_object)) == repr_object
