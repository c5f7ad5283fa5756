"""Local storage for the advice API key.

The key is XOR-ed with a fixed salt and base64 encoded before it is written,
so it is not stored as plain text. This is obfuscation, not encryption.
"""

import base64
import binascii
import json
from pathlib import Path
from typing import Optional, Union

import structlog

logger = structlog.get_logger(__name__)

SECRET_SALT = "MAHJONG_MASTER_SECURE_KEY_v1"
_KEY_FIELD = "api_key"


def obfuscate(text: str) -> str:
    data = text.encode("utf-8")
    salt = SECRET_SALT.encode("utf-8")
    mixed = bytes(b ^ salt[i % len(salt)] for i, b in enumerate(data))
    return base64.b64encode(mixed).decode("ascii")


def deobfuscate(encoded: str) -> str:
    """Reverse obfuscate(). Raises ValueError on corrupt input."""
    try:
        mixed = base64.b64decode(encoded.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as e:
        raise ValueError("stored key is not valid base64") from e
    salt = SECRET_SALT.encode("utf-8")
    data = bytes(b ^ salt[i % len(salt)] for i, b in enumerate(mixed))
    return data.decode("utf-8")


class CredentialStore:
    """Persists one opaque credential in a small JSON file."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def load(self) -> Optional[str]:
        """Stored key, or None if missing or unreadable."""
        if not self.path.exists():
            return None
        try:
            with self.path.open(encoding="utf-8") as f:
                data = json.load(f)
            encoded = data[_KEY_FIELD]
            key = deobfuscate(encoded)
        except (OSError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("ignoring unreadable credential file", path=str(self.path), error=str(e))
            return None
        return key or None

    def save(self, credential: str):
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("w", encoding="utf-8") as f:
            json.dump({_KEY_FIELD: obfuscate(credential)}, f)
        logger.info("credential saved", path=str(self.path))

    def clear(self):
        if self.path.exists():
            self.path.unlink()
            logger.info("credential removed", path=str(self.path))

    @property
    def has_credential(self) -> bool:
        return self.load() is not None
