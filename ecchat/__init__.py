"""
ecchat

End-to-end message confidentiality for a two-party chat relayed in the clear:
- Toy short Weierstrass curve over a small prime field
- Ephemeral per-session key pairs
- Character-by-character EC-ElGamal encryption
- JSON wire models for ciphertexts and public keys
"""

__version__ = "1.0.0"
