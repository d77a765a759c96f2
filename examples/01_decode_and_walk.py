#!/usr/bin/env python3
"""
Example 1: Decode a Zcash transaction and walk it as an IPLD node

Decodes raw transaction hex, prints its CID and hashes, lists the links to
the transactions it spends, and resolves a few paths.

Usage:
    python 01_decode_and_walk.py --tx-hex 0100000001...
    python 01_decode_and_walk.py --depth 3
"""

import argparse
import logging

from zcash_ipld import (
    DecodeOptions,
    TxNode,
    ZcashIpldError,
)

# version 1 coinbase paying 50 ZEC to an empty script
DEFAULT_TX_HEX = (
    "01000000" "01" + "00" * 32 + "00000000" "00" "ffffffff"
    "01" "00f2052a01000000" "00" "00000000"
)


def main():
    parser = argparse.ArgumentParser(description="Decode and walk a Zcash transaction")
    parser.add_argument("--tx-hex", default=DEFAULT_TX_HEX, help="Serialized transaction as hex")
    parser.add_argument("--depth", type=int, default=3, help="Tree enumeration depth")
    parser.add_argument("--groth", action="store_true", help="Join-split proofs are Groth16")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    options = DecodeOptions(joinsplit_proof_size=192 if args.groth else 296)
    try:
        node = TxNode.from_bytes(bytes.fromhex(args.tx_hex), options)
    except (ValueError, ZcashIpldError) as e:
        print(f"[FAIL] could not decode transaction: {e}")
        return 1

    tx = node.tx
    print("=== Zcash transaction ===")
    print(f"CID:       {node.cid()}")
    print(f"txid:      {tx.hex_hash()}")
    print(f"size:      {node.size()} bytes")
    print(f"version:   {tx.version}")
    print(f"inputs:    {len(tx.inputs)}")
    print(f"outputs:   {len(tx.outputs)}")

    print("\nLinks:")
    for link in node.links():
        print(f"  {link}")
    if not node.links():
        print("  (none, coinbase only)")

    print(f"\nTree (depth {args.depth}):")
    for path in node.tree("", args.depth):
        print(f"  {path}")

    print("\nResolved:")
    for i, _ in enumerate(tx.outputs):
        value, _ = node.resolve(["outputs", str(i), "value"])
        print(f"  outputs/{i}/value = {value.value} zatoshi")

    total = sum(out.value for out in tx.outputs)
    print(f"\nTotal output value: {total / 1e8:.8f} ZEC")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
