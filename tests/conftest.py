"""Shared pytest fixtures for filezipper tests."""

import random

import pytest

from app import app as flask_app


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


@pytest.fixture()
def text_data():
    """Repetitive English-like text, compresses well."""
    return b"the quick brown fox jumps over the lazy dog. " * 40


@pytest.fixture()
def random_data():
    """4 KB of seeded random bytes, close to incompressible."""
    rng = random.Random(42)
    return bytes(rng.getrandbits(8) for _ in range(4096))


@pytest.fixture()
def skewed_data():
    """Mixed payload with a few dominant byte values."""
    rng = random.Random(7)
    weights = [50, 20, 10, 5] + [1] * 12
    symbols = list(range(16))
    return bytes(rng.choices(symbols, weights=weights, k=5000))


@pytest.fixture()
def input_file(tmp_path, text_data):
    path = tmp_path / "input.txt"
    path.write_bytes(text_data)
    return path


# ---------------------------------------------------------------------------
# Flask
# ---------------------------------------------------------------------------


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setitem(flask_app.config, "DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setitem(flask_app.config, "TESTING", True)
    with flask_app.test_client() as test_client:
        yield test_client
