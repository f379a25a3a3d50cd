#!/usr/bin/env python3
"""
Quick functionality check for PowerCurve.

Usage:
    python scripts/quick_check.py
    python scripts/quick_check.py -v  # verbose mode
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

VERBOSE = "-v" in sys.argv or "--verbose" in sys.argv


def log(msg):
    if VERBOSE:
        print(f"  {msg}")


def _power(analysis, values):
    result = analysis.find_power(values, print_results=False, return_results=True)
    return result["results"]["powers"]["power"].tolist()


def check_large_effect():
    """d = 2 should be detected almost always."""
    from powercurve import PowerAnalysis

    (power,) = _power(PowerAnalysis.continuous().set_repetitions(500), [2.0])
    assert power >= 0.9, f"Unexpected power: {power}"
    log(f"Power at d=2: {power:.3f}")


def check_null_continuous():
    """d = 0 should reject at about alpha."""
    from powercurve import PowerAnalysis

    (power,) = _power(PowerAnalysis.continuous().set_repetitions(500), [0.0])
    assert 0.01 < power < 0.1, f"Unexpected type I error: {power}"
    log(f"Power at d=0: {power:.3f}")


def check_binary_curve():
    """Power grows as p2 moves away from p1."""
    from powercurve import PowerAnalysis

    powers = _power(PowerAnalysis.binary().set_repetitions(500), [0.3, 0.6, 0.95])
    assert powers[0] < powers[1] < powers[2], f"Not monotonic: {powers}"
    assert powers[2] > 0.8, f"Unexpected power at p2=0.95: {powers[2]}"
    log(f"Powers at p2=0.3, 0.6, 0.95: {powers}")


def check_reproducible():
    """Same seed, same table."""
    from powercurve import PowerAnalysis

    analysis = PowerAnalysis.binary().set_seed(7).set_repetitions(200)
    first = analysis.find_power([0.5], print_results=False, return_results=True)["results"]["trials"]
    second = analysis.find_power([0.5], print_results=False, return_results=True)["results"]["trials"]
    assert first.equals(second), "Sweeps with the same seed differ"


def run_all():
    """Run all checks."""
    checks = [
        ("Large effect", check_large_effect),
        ("Null continuous", check_null_continuous),
        ("Binary curve", check_binary_curve),
        ("Reproducible", check_reproducible),
    ]

    passed = 0
    failed = 0

    print("=" * 50)
    print("PowerCurve Quick Check")
    print("=" * 50)

    for name, check_func in checks:
        try:
            check_func()
            print(f"[PASS] {name}")
            passed += 1
        except Exception as e:
            print(f"[FAIL] {name}: {e}")
            failed += 1

    print("=" * 50)
    print(f"Results: {passed} passed, {failed} failed")
    print("=" * 50)

    return failed == 0


if __name__ == "__main__":
    sys.exit(0 if run_all() else 1)
