# Ensure tests can import project modules when running from repository root
import os
import sys

import pytest
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes

ROOT = os.path.dirname(os.path.abspath(os.path.join(__file__, os.pardir)))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


@pytest.fixture
def crypto_digest():
    """Reference digest from the ``cryptography`` package.

    Skips the test when the linked OpenSSL does not provide the algorithm
    (SM3 and the SHA-512/t variants are missing from some builds).
    """
    def digest(algorithm: hashes.HashAlgorithm, data: bytes) -> bytes:
        try:
            h = hashes.Hash(algorithm)
        except UnsupportedAlgorithm:
            pytest.skip(f"{algorithm.name} is not available in this OpenSSL build")
        h.update(data)
        return h.finalize()

    return digest
