from pathlib import Path
from setuptools import setup, find_packages


this_dir = Path(__file__).parent
long_description = (this_dir / "README.md").read_text()
setup(
    name="rktvd",
    version="0.1",
    description="Explicit TVD/SSP Runge-Kutta time integration",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages("src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy",
        "scipy",
        "matplotlib",
    ],
    extras_require={
        "dev": [
            "pytest",
            "pylint",
        ]
    },
)
