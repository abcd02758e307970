"""Default settings decrypter.

Passes plaintext credentials through unchanged. Values in the encrypted
``{...}`` form cannot be decrypted here; each one is reported as a
problem and left as is, so callers can plug in a real decrypter.
"""

import re
from typing import List, Optional, Sequence

from ..repository.base import Proxy, Server
from .base import DecryptionProblem, DecryptionResult

ENCRYPTED_VALUE = re.compile(r"^\{[^{}]*\}$")


def is_encrypted(value: Optional[str]) -> bool:
    if not isinstance(value, str) or not value:
        return False
    return ENCRYPTED_VALUE.match(value.strip()) is not None


class PassthroughDecrypter:
    """Settings decrypter that reports, but never decrypts, secrets."""

    def decrypt(
        self, proxies: Sequence[Proxy], servers: Sequence[Server]
    ) -> DecryptionResult:
        problems: List[DecryptionProblem] = []

        for proxy in proxies:
            if is_encrypted(proxy.password):
                problems.append(
                    DecryptionProblem(
                        f"Failed to decrypt password for proxy {proxy.id or proxy.host}: "
                        f"no decryption key configured"
                    )
                )

        for server in servers:
            for name, value in (("password", server.password), ("passphrase", server.passphrase)):
                if is_encrypted(value):
                    problems.append(
                        DecryptionProblem(
                            f"Failed to decrypt {name} for server {server.id}: "
                            f"no decryption key configured"
                        )
                    )

        return DecryptionResult(
            proxies=list(proxies), servers=list(servers), problems=problems
        )
