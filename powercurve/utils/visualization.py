"""
Visualization utilities for PowerCurve.

This module provides the power-curve plot for sweep results.
"""

from typing import Optional, Sequence

__all__ = []


def _create_power_plot(
    values: Sequence[float],
    powers: Sequence[float],
    parameter_label: str,
    target_power: float,
    title: str,
    output_path: Optional[str] = None,
    width: float = 7.0,
    height: float = 5.0,
    dpi: int = 150,
):
    """Create a scenario-value vs. power plot with a target reference line.

    Draws one point per scenario value joined by a thin line, and a
    horizontal dashed line at the target power.

    Args:
        values: X-axis scenario values.
        powers: Estimated power (0-1) for each value.
        parameter_label: X-axis label.
        target_power: Target power as a proportion (drawn as reference line).
        title: Plot title.
        output_path: File to save the figure to. When ``None`` the figure
            is shown instead.
        width: Figure width in inches.
        height: Figure height in inches.
        dpi: Resolution of the saved image.

    Raises:
        ImportError: If ``matplotlib`` is not installed.
    """
    try:
        import matplotlib.pyplot as plt
    except ImportError:
        raise ImportError("matplotlib required for plotting: pip install matplotlib") from None

    fig, ax = plt.subplots(figsize=(width, height))

    ax.plot(values, powers, "o-", color="#1f77b4", linewidth=1, markersize=5, label="Estimated power")

    # Target power line
    ax.axhline(
        y=target_power,
        color="red",
        linestyle="--",
        linewidth=1.5,
        label=f"Target Power ({target_power:.0%})",
    )

    ax.set_title(title, fontsize=13, fontweight="bold")
    ax.set_xlabel(parameter_label, fontsize=11)
    ax.set_ylabel("Power", fontsize=11)
    ax.set_ylim(-0.02, 1.02)
    ax.grid(True, alpha=0.3)
    ax.legend(loc="lower right")

    plt.tight_layout()
    if output_path is not None:
        fig.savefig(output_path, dpi=dpi)
        plt.close(fig)
    else:
        plt.show()
