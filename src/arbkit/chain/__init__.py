"""
Chain - On-chain interaction layer for arbkit.

Provides the JSON-RPC client, ABI helpers, address and unit handling, fee
arithmetic and transaction utilities for Arbitrum Sepolia.

Uses httpx + eth-account + eth-abi instead of the heavyweight web3.py.
"""
