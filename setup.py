from setuptools import find_packages, setup

setup(
    name="wormhole",
    version="0.1.0",
    description="Wormhole - bidirectional links between nodes of separately stored maps",
    packages=find_packages(include=["wormhole", "wormhole.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Configuration and output schemas, map file format
        "typer",  # CLI
        "rich",  # Terminal formatting
        "pyyaml",  # YAML command output
        "pygments",  # Highlighted command output on terminals
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "wormhole=wormhole.cli:main",
        ],
    },
)
