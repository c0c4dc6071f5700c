#!/usr/bin/env python3
"""
Two-Party Chat Demo

Runs two sessions in one process. Every message between them is serialized
to JSON first, standing in for the plaintext relay.

Usage:
    python scripts/chat_demo.py --message "hello there" --message "hi"
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ecchat.common.exceptions import EcChatException
from ecchat.common.protocol import deserialize_message, serialize_message
from ecchat.common.utils import setup_logger
from ecchat.config import load_curve
from ecchat.session import ChatSession


def relay(message) -> str:
    """Serialize a wire message the way the relay would carry it."""
    return serialize_message(message)


def run_demo(messages, verbose: bool = False):
    """
    Exchange keys between two sessions and send messages both ways.

    Args:
        messages: Plaintext strings, sent alternately by alice and bob
        verbose: Show ciphertext JSON
    """
    curve = load_curve()
    alice = ChatSession("alice", curve)
    bob = ChatSession("bob", curve)

    print("[Phase 1] Public Key Exchange")
    alice.set_peer_key(deserialize_message(relay(bob.public_key_message())))
    bob.set_peer_key(deserialize_message(relay(alice.public_key_message())))
    print(f"  [✓] alice holds bob's key {alice.peer_public_key}")
    print(f"  [✓] bob holds alice's key {bob.peer_public_key}")

    print("\n[Phase 2] Encrypted Messages")
    for i, text in enumerate(messages):
        sender, receiver = (alice, bob) if i % 2 == 0 else (bob, alice)
        wire = relay(sender.seal(text))
        print(f"  [>] {sender.sender_id}: {text!r} ({len(text)} pairs)")
        if verbose:
            print(f"      {wire}")
        received = receiver.open(wire)
        print(f"  [<] {receiver.sender_id} read: {received!r}")

    print("\n[✓] Demo complete")


def main():
    parser = argparse.ArgumentParser(
        description="Exchange EC-ElGamal encrypted messages between two local sessions"
    )
    parser.add_argument(
        "--message",
        action="append",
        help="Message to send (repeatable; alternates sender)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print the serialized ciphertext of each message"
    )

    args = parser.parse_args()
    setup_logger()

    try:
        run_demo(args.message or ["hello", "hi"], verbose=args.verbose)
    except EcChatException as e:
        print(f"[!] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
