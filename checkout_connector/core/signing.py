"""Request signing.

The remote API authenticates a request by recomputing a digest over the
request body followed by the shared secret.  The secret itself never leaves
the client.
"""

from __future__ import annotations

import base64
import hashlib
from typing import Protocol


class Signer(Protocol):
    def sign(self, payload: bytes, secret: str) -> str: ...


class Sha256Signer:
    """Base64-encoded SHA-256 of ``payload + secret``."""

    def sign(self, payload: bytes, secret: str) -> str:
        digest = hashlib.sha256(payload + secret.encode("utf-8")).digest()
        return base64.b64encode(digest).decode("ascii")
