"""Reed-Solomon error correction over GF(2^8), with erasure decoding and BPSK channel-noise helpers."""

__version__ = "0.1.0"
__all__ = ["decode", "locator", "noise", "polynomial", "primitive", "reed_solomon"]