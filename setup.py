from pathlib import Path
import re

from setuptools import find_packages, setup

HERE = Path(__file__).parent


def _read_version() -> str:
    """Read __version__ from src/docfmt/__init__.py without importing it."""
    text = (HERE / "src" / "docfmt" / "__init__.py").read_text(encoding="utf-8")
    match = re.search(r"^__version__ = ['\"]([^'\"]+)['\"]", text, re.M)
    if not match:
        raise RuntimeError("Unable to find __version__ in src/docfmt/__init__.py")
    return match.group(1)


setup(
    name="docfmt",
    version=_read_version(),
    description="Assemble one document from Jinja2 template fragments and merged JSON/TOML data",
    author="docfmt contributors",
    python_requires=">=3.11",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "Jinja2>=3.1",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    entry_points={
        "console_scripts": [
            "docfmt=docfmt.cli:main",
        ],
    },
)
