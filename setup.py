"""Setup script for the zetaml linear algebra library."""

from setuptools import find_packages, setup

setup(
    name="zetaml",
    version="0.1.0",
    description="Vector and matrix value types with 3D transform and projection matrices",
    author="Zeta Maths Team",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.10",
    install_requires=[
        "numpy>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "black>=23.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
)
