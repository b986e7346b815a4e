from __future__ import annotations

import hashlib
import hmac
import secrets
from typing import Final, Sequence

from rps_errors import EntropySourceError

KEY_BYTES: Final[int] = 32


def generate_key(num_bytes: int = KEY_BYTES) -> str:
    # Hex so the key can be pasted into any HMAC tool for verification.
    try:
        raw = secrets.token_bytes(num_bytes)
    except (OSError, NotImplementedError) as exc:
        raise EntropySourceError(f"secure random source unavailable: {exc}") from exc
    return raw.hex()


def select_move_index(moves: Sequence[str]) -> int:
    """Pick the opponent's move uniformly from the same secure source as the key."""
    try:
        return secrets.randbelow(len(moves))
    except (OSError, NotImplementedError) as exc:
        raise EntropySourceError(f"secure random source unavailable: {exc}") from exc


def compute_commitment(*, key: str, move: str) -> str:
    # The HMAC is keyed with the hex text itself, not the decoded bytes.
    return hmac.new(key.encode("utf-8"), move.encode("utf-8"), hashlib.sha256).hexdigest()


def verify_commitment(*, expected_commitment: str, key: str, move: str) -> bool:
    computed = compute_commitment(key=key, move=move)
    return secrets.compare_digest(expected_commitment.lower(), computed)
