from setuptools import setup, find_packages

setup(
    name="PowerCurve",
    version="0.1.0",
    packages=find_packages(include=["powercurve", "powercurve.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "pandas",
        "matplotlib",
        "scipy>=1.11",
    ],
    extras_require={
        "progress": ["tqdm"],
        "test": ["pytest"],
    },
    description="Monte Carlo power curves for two-group designs",
)
