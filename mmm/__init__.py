"""Pricing, fee and allowlist eligibility core for MMM NFT liquidity pools."""

__version__ = "0.1.0"
