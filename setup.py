from __future__ import annotations

from setuptools import find_packages, setup

# numba and jax stay optional; the factory falls back to NumPy without them.
setup(
    name="pyinterp1d",
    version="0.1.0",
    description="Piecewise-linear interpolation over one-dimensional sample tables",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=["numpy>=1.22"],
    extras_require={
        "numba": ["numba>=0.56"],
        "jax": ["jax>=0.4"],
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "pyinterp1d-bench=pyinterp1d.benchmark:main",
        ],
    },
)
