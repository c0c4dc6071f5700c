#!/usr/bin/env python3
"""
Generate a Session Key Pair

Prints a fresh key pair on the configured curve and the public-key message
to hand to the peer. Nothing is written to disk.

Usage:
    python scripts/gen_keypair.py --sender alice
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from ecchat.common.exceptions import EcChatException
from ecchat.common.protocol import PublicKeyMessage, serialize_message
from ecchat.config import load_curve
from ecchat.crypto import generate_keypair


def generate(sender: str):
    """
    Generate and print a key pair.

    Args:
        sender: Identifier placed in the public-key message

    Returns:
        KeyPair
    """
    curve = load_curve()
    print(f"[*] Curve {curve.name}: y^2 = x^3 + {curve.a}x + {curve.b} mod {curve.p}")
    print(f"    G = {curve.g}, n = {curve.n}")

    keypair = generate_keypair(curve)
    message = PublicKeyMessage(sender=sender, x=keypair.public_key.x, y=keypair.public_key.y)

    print(f"\n[✓] Key pair generated")
    print(f"    Private key: {keypair.private_key}")
    print(f"    Public key:  {keypair.public_key}")
    print(f"\n[*] Public key message:")
    print(f"    {serialize_message(message)}")

    return keypair


def main():
    parser = argparse.ArgumentParser(
        description="Generate an ephemeral EC-ElGamal key pair"
    )
    parser.add_argument(
        "--sender",
        default="local",
        help="Sender identifier for the public-key message (default: local)"
    )

    args = parser.parse_args()

    try:
        generate(args.sender)
    except EcChatException as e:
        print(f"[!] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
