import numpy as np
import pytest


SEQUENCE_LENGTH = 1_000_000


@pytest.fixture(scope="session")
def sequence_string():
    rng = np.random.default_rng(0)
    code = rng.integers(4, size=SEQUENCE_LENGTH, dtype=np.uint8)
    return np.frombuffer(b"ACGT", dtype="|S1")[code].tobytes().decode("ASCII")
