"""
Setup script for numkit

Pure Python package; the version is read from src/numkit/__init__.py.
"""

from pathlib import Path
from setuptools import setup, find_packages


# Read version from src/numkit/__init__.py
def get_version():
    version_file = Path("src/numkit/__init__.py")
    if version_file.exists():
        for line in version_file.read_text().splitlines():
            if line.startswith("__version__"):
                return line.split("=")[1].strip().strip('"').strip("'")
    return "0.1.0"


# Read long description from README
def get_long_description():
    readme = Path("README.md")
    if readme.exists():
        return readme.read_text(encoding="utf-8")
    return ""


setup(
    name="numkit",
    version=get_version(),
    description="Element-wise relational operators over dense and sparse matrices with runtime type dispatch",
    long_description=get_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["numkit", "numkit.*"]),
    install_requires=[
        "numpy",
        "scipy",
        "sympy",
    ],
    extras_require={
        "test": ["pytest"],
    },
    zip_safe=True,
)
