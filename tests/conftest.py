import os

import pytest

from ATGCCoder.config import CodecConfig


SAMPLE_PAYLOADS = [
    b"",
    b"\x00",
    b"\xff",
    bytes([0b01101100]),
    b"hello, world",
    bytes(range(256)),
]


@pytest.fixture(params=SAMPLE_PAYLOADS, ids=lambda p: f"{len(p)}b")
def payload(request) -> bytes:
    return request.param


@pytest.fixture
def random_payload() -> bytes:
    return os.urandom(1024)


@pytest.fixture
def small_limit_config() -> CodecConfig:
    return CodecConfig(max_input_bytes=4)
