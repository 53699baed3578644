# tests/conftest.py
import pytest

from pkg_ajwt import FixedClock, TokenCodec, create_token_codec

NOW = 1_700_000_000
KEY = "unit-secret"


def codec_at(instant: int) -> TokenCodec:
    return create_token_codec(clock=FixedClock(instant))


@pytest.fixture
def codec() -> TokenCodec:
    return codec_at(NOW)
