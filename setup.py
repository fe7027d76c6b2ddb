"""Setup script for polymetric"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README
this_directory = Path(__file__).parent
long_description = ""
readme_path = this_directory / "README.md"
if readme_path.exists():
    long_description = readme_path.read_text(encoding="utf-8")

setup(
    name="polymetric",
    version="0.3.0",
    description="Multi-language source code metrics: cyclomatic, cognitive, Halstead, LOC, MI and more",
    long_description=long_description,
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Quality Assurance",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    python_requires=">=3.9",
    install_requires=[
        "tree-sitter>=0.22.0",
        "tree-sitter-python>=0.21.0",
        "tree-sitter-javascript>=0.21.0",
        "tree-sitter-typescript>=0.21.0",
        "tree-sitter-rust>=0.21.0",
        "tree-sitter-java>=0.21.0",
        "tree-sitter-c>=0.21.0",
        "tree-sitter-cpp>=0.22.0",
        "tree-sitter-go>=0.21.0",
        "tree-sitter-c-sharp>=0.21.0",
        "tree-sitter-lua>=0.1.0",
        "rich>=13.0.0",
        "typer>=0.9.0",
        "tomli>=2.0.0; python_version < '3.11'",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "polymetric=polymetric.cli:main",
        ],
    },
    keywords="code-metrics static-analysis complexity cyclomatic cognitive halstead tree-sitter",
)
