"""Tests for RNG and signature helpers."""

import random

from nacl.signing import SigningKey

from src.utils.crypto import create_rng, verify_signature


class TestCreateRng:
    def test_seeded_is_deterministic(self):
        assert create_rng(3).random() == create_rng(3).random()

    def test_unseeded_is_system_random(self):
        assert isinstance(create_rng(), random.SystemRandom)


class TestVerifySignature:
    def setup_method(self):
        self.key = SigningKey.generate()
        self.public = self.key.verify_key.encode().hex()

    def _sign(self, timestamp: str, body: bytes) -> str:
        return self.key.sign(timestamp.encode() + body).signature.hex()

    def test_valid(self):
        body = b'{"type":1}'
        sig = self._sign("1700000000", body)
        assert verify_signature(self.public, sig, "1700000000", body)

    def test_tampered_body(self):
        sig = self._sign("1700000000", b'{"type":1}')
        assert not verify_signature(self.public, sig, "1700000000", b'{"type":2}')

    def test_wrong_timestamp(self):
        body = b"{}"
        sig = self._sign("1", body)
        assert not verify_signature(self.public, sig, "2", body)

    def test_other_key(self):
        body = b"{}"
        sig = self._sign("1", body)
        other = SigningKey.generate().verify_key.encode().hex()
        assert not verify_signature(other, sig, "1", body)

    def test_missing_headers(self):
        assert not verify_signature(self.public, None, "1", b"{}")
        assert not verify_signature(self.public, "ab" * 64, None, b"{}")
        assert not verify_signature("", "ab" * 64, "1", b"{}")

    def test_malformed_hex(self):
        assert not verify_signature(self.public, "not-hex", "1", b"{}")
        assert not verify_signature("zz", "ab" * 64, "1", b"{}")

    def test_short_signature(self):
        assert not verify_signature(self.public, "abcd", "1", b"{}")
