"""
Setup script for semantic-canvas: canvas connections as note properties, and back
"""

from setuptools import setup, find_packages

setup(
    name="semantic-canvas",
    version="1.0.0",
    description="Sync canvas diagrams with list-typed note properties",
    long_description="Turns the nodes, edges and groups of a JSON canvas into front matter properties of the notes on it, and lays out canvases from note properties",
    long_description_content_type="text/markdown",
    package_dir={"": "src"},
    packages=find_packages(where="src", exclude=["tests*", "docs*", "examples*"]),
    python_requires=">=3.8",
    install_requires=[
        # Core dependencies
        "pydantic>=2.7.0",
        "pydantic-settings>=2.0.0",
        "python-dotenv>=1.0.0",

        # Front matter
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-mock>=3.10.0",
            "black>=22.0.0",
            "isort>=5.10.0",
            "mypy>=1.0.0",
            "flake8>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "semantic-canvas=semantic_canvas.cli:main",
        ],
    },
    author="Semantic Canvas Team",
    license="MIT",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Text Processing :: Markup",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="canvas obsidian front-matter knowledge-graph properties",
)
