"""Shared fixtures for abcq tests."""

import pytest

from abcq.core.codec import BijectiveCodec


@pytest.fixture
def codec():
    """Codec with the default a-zA-Z alphabet and counter."""
    return BijectiveCodec()


@pytest.fixture
def ab_codec():
    """Codec over the two-symbol alphabet 'ab'."""
    return BijectiveCodec(chars="ab")
