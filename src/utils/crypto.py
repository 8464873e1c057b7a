"""Randomness and request signature utilities."""

from __future__ import annotations

import logging
import random
import secrets

from nacl.exceptions import BadSignatureError
from nacl.signing import VerifyKey

logger = logging.getLogger("dicebot.crypto")


def create_rng(seed: int | None = None) -> random.Random:
    """Create a Random instance.

    If seed is provided, returns a deterministic Random (for tests/replay).
    If seed is None, returns SystemRandom (cryptographically secure).
    """
    if seed is not None:
        return random.Random(seed)
    return secrets.SystemRandom()


def verify_signature(
    public_key: str, signature: str | None, timestamp: str | None, body: bytes
) -> bool:
    """Check an Ed25519 signature over ``timestamp + body``.

    ``public_key`` and ``signature`` are hex strings as sent by the platform.
    Any malformed input counts as an invalid signature.
    """
    if not public_key or not signature or not timestamp:
        return False
    try:
        verify_key = VerifyKey(bytes.fromhex(public_key))
        verify_key.verify(timestamp.encode() + body, bytes.fromhex(signature))
    except BadSignatureError:
        logger.warning("Signature mismatch")
        return False
    except ValueError:
        logger.warning("Malformed signature or public key")
        return False
    return True
