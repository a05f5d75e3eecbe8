from setuptools import setup, find_packages

setup(
    name="scpn-equilibria",
    version="0.1.0",
    license="AGPL-3.0-or-later",
    description="Closed-form analytic magnetic field equilibria (Solov'ev X-point, tokamak, quadratic)",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "scipy",
        "pydantic>=2.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
            "hypothesis>=6.0",
        ],
    },
)
