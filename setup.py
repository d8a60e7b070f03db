from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="tiddlercrypt",
    version="1.0.0",
    packages=find_packages(exclude=("tests", "tests.*", "debug", "scripts")),
    install_requires=[
        "cryptography>=41.0.0",
        "numpy>=1.24.0",
    ],
    extras_require={
        "color": ["colorama>=0.4.6"],
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "tiddlercrypt=tiddlercrypt.main:main",
        ],
    },
    python_requires=">=3.10",
    description="Password-protect a single tiddler inside a TiddlyWiki document with TEA",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
