import pytest
import dnapack.sequence as seq


@pytest.fixture(scope="module")
def packed_sequence(sequence_string):
    return seq.PackedSequence.parse(sequence_string)


@pytest.mark.benchmark
def benchmark_parse(sequence_string):
    seq.PackedSequence.parse(sequence_string)


@pytest.mark.benchmark
def benchmark_collect(packed_sequence):
    seq.PackedSequence.collect(packed_sequence)


@pytest.mark.benchmark
def benchmark_get(packed_sequence):
    for i in range(0, len(packed_sequence), 1000):
        packed_sequence.get(i)


@pytest.mark.benchmark
def benchmark_symbol_frequency(packed_sequence):
    packed_sequence.get_symbol_frequency()


@pytest.mark.benchmark
def benchmark_str(packed_sequence):
    str(packed_sequence)
