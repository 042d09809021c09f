"""
Module 09C - Airdrop CLI

Command-line interface for Merkle airdrop campaigns.

Usage:
    python -m airdrop_cli leaf --address 0x.. --amount 100
    python -m airdrop_cli verify --root 0x.. --address 0x.. --amount 100 --index 0 --proof 0x..
    python -m airdrop_cli check distribution.json
    python -m airdrop_cli serve --port 8000
    python -m airdrop_cli config --init
"""

__version__ = "0.1.0"
