"""
Text formatting of PowerCurve results.
"""

from typing import Any, Dict

__all__ = []


def _format_results(result: Dict[str, Any]) -> str:
    """Render a ``find_power`` result as a fixed-width text table."""
    model = result["model"]
    parameter = model["parameter"]
    powers = result["results"]["powers"]
    first = result["results"]["first_achieved"]

    lines = [
        f"Design: {model['design']} ({model['test']})",
        f"Alpha: {model['alpha']}   Repetitions: {model['n_repetitions']}   Seed: {model['seed']}",
        "",
        f"{parameter:>10} {'Power':>8} {'MC SE':>8} {'Significant':>14}",
        "-" * 43,
    ]
    for row in powers.itertuples(index=False):
        value, n_trials, n_significant, power, mc_se = row
        lines.append(f"{value:>10.4g} {power:>8.3f} {mc_se:>8.3f} {f'{n_significant}/{n_trials}':>14}")

    lines.append("")
    target = model["target_power"]
    if first is None:
        lines.append(f"Target power ({target:.0f}%) not reached for any {parameter} tested.")
    else:
        lines.append(f"Target power ({target:.0f}%) first reached at {parameter} = {first:.4g}")
    return "\n".join(lines)
