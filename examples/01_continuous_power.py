"""
Continuous Outcome Power Curve
==============================

Two groups of 10 observations; group B is shifted by effect size d
(in standard deviations). Each dataset is tested with a Welch t-test.
How large must d be before the study has 80% power?
"""

import numpy as np

from powercurve import PowerAnalysis

print("=" * 60)
print("CONTINUOUS OUTCOME: WELCH T-TEST, 10 PER GROUP")
print("=" * 60)

# 1. Design: 10 observations per group
analysis = PowerAnalysis.continuous(n_per_group=10)

# 2. Settings: fixed seed so the whole sweep is reproducible
analysis.set_seed(2137).set_repetitions(500).set_alpha(0.05)

# 3. Grid of effect sizes, simulated in this order
d_values = np.round(np.arange(0.0, 2.01, 0.1), 2)

result = analysis.find_power(d_values, return_results=True)

# 4. Power curve with the 80% reference line
analysis.plot(result, output_path="power_continuous.png", width=7, height=5, dpi=150)
print("\nPower curve written to power_continuous.png")
