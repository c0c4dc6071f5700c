"""
Chat Session

Holds one participant's side of a conversation:
1. Fresh key pair generated when the session starts
2. Public key published to the peer (out of band, via the relay)
3. Outgoing text encrypted under the peer's public key
4. Incoming payloads decrypted with the local private key

Public keys are trusted on receipt; nothing authenticates the peer.
"""

import logging
from typing import Optional, Union

from ecchat.common.exceptions import InvalidKeyError, ProtocolError
from ecchat.common.protocol import (
    MessageFailMessage, MessagePayload, PublicKeyMessage,
    ciphertext_from_wire, ciphertext_to_wire, deserialize_message,
)
from ecchat.common.utils import now_ms
from ecchat.crypto import (
    EllipticCurve, Point, TOY_CURVE,
    decrypt_string, encrypt_string, generate_keypair, validate_public_key,
)

logger = logging.getLogger(__name__)


class ChatSession:
    """
    One participant's end of an encrypted chat.
    """

    def __init__(self, sender_id: str, curve: EllipticCurve = TOY_CURVE):
        """
        Start a session with a new key pair.

        Args:
            sender_id: Identifier attached to outgoing payloads
            curve: Domain parameters shared with the peer
        """
        self.sender_id = sender_id
        self.curve = curve
        self.keypair = generate_keypair(curve)
        self.peer_id = None
        self.peer_public_key = None

        logger.debug("Session %s started with public key %s", sender_id, self.keypair.public_key)

    @property
    def public_key(self) -> Point:
        return self.keypair.public_key

    def public_key_message(self) -> PublicKeyMessage:
        """Build the message announcing this session's public key."""
        return PublicKeyMessage(sender=self.sender_id, x=self.public_key.x, y=self.public_key.y)

    def set_peer_key(self, key: Union[PublicKeyMessage, Point], peer_id: Optional[str] = None):
        """
        Accept the peer's public key.

        Args:
            key: PublicKeyMessage from the peer, or a Point
            peer_id: Peer identifier (taken from the message when omitted)

        Raises:
            InvalidKeyError: If the key is not a valid group element
        """
        if isinstance(key, PublicKeyMessage):
            point = Point(key.x, key.y)
            peer_id = peer_id or key.sender
        else:
            point = key

        validate_public_key(point, self.curve)
        self.peer_public_key = point
        self.peer_id = peer_id
        logger.debug("Session %s accepted peer key %s from %s", self.sender_id, point, peer_id)

    def seal(self, text: str) -> MessagePayload:
        """
        Encrypt text for the peer.

        Raises:
            InvalidKeyError: If no peer key has been set
            EncodingError: If text contains a character that cannot be encoded
        """
        if self.peer_public_key is None:
            raise InvalidKeyError("Peer public key not set")

        ciphertext = encrypt_string(self.peer_public_key, text, self.curve)
        return MessagePayload(
            content=ciphertext_to_wire(ciphertext),
            sender=self.sender_id,
            ts=now_ms(),
        )

    def open(self, payload: Union[MessagePayload, str]) -> str:
        """
        Decrypt a payload addressed to this session.

        A payload encrypted under some other key decrypts to garbage rather
        than raising.

        Args:
            payload: MessagePayload or its JSON serialization

        Raises:
            ProtocolError: If the JSON is not a message payload
            DecryptionError: If a ciphertext pair cannot be decrypted
        """
        if isinstance(payload, str):
            payload = deserialize_message(payload)
            if not isinstance(payload, MessagePayload):
                raise ProtocolError(f"Expected a message payload, got {payload.type!r}")

        return decrypt_string(self.keypair.private_key, ciphertext_from_wire(payload.content), self.curve)

    @staticmethod
    def fail(error: str) -> MessageFailMessage:
        """Build the failure notice returned to a sender."""
        return MessageFailMessage(error=error)
