"""
Strict Parity Helper

Byte comparison with a row-by-row hex diff on mismatch, for wire layout
tests.
"""


def assert_hex_equal(actual: bytes, expected_hex: str, ctx: str) -> None:
    """
    Assert that actual bytes match expected hex string with detailed diff output.

    Args:
        actual: Actual bytes to compare
        expected_hex: Expected hex string (spaces allowed)
        ctx: Context string for error messages

    Raises:
        AssertionError: If bytes don't match, with detailed diff
    """
    expected_hex = expected_hex.replace(" ", "").lower()
    actual_hex = actual.hex().lower()

    if actual_hex == expected_hex:
        return

    expected_bytes = bytes.fromhex(expected_hex)
    lines = [
        f"Binary mismatch in {ctx}",
        f"   Expected length: {len(expected_bytes)} bytes",
        f"   Actual length:   {len(actual)} bytes",
        f"   {'Offset':<8} {'Expected':<47} {'Actual':<47}",
    ]

    max_len = max(len(expected_bytes), len(actual))
    for i in range(0, max_len, 16):
        exp_chunk = expected_bytes[i : i + 16]
        act_chunk = actual[i : i + 16]
        if exp_chunk == act_chunk:
            continue
        exp_hex = " ".join(f"{b:02x}" for b in exp_chunk).ljust(47)
        act_hex = " ".join(f"{b:02x}" for b in act_chunk).ljust(47)
        lines.append(f"   {i:08x} {exp_hex} {act_hex}")

    raise AssertionError("\n".join(lines))
