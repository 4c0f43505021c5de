from setuptools import find_packages, setup

setup(
    name="mdlc",
    version="0.1.0",
    description="Markdown link checker - concurrent validation of local paths, anchors and URLs",
    author="William Wieselquist",
    packages=find_packages(include=["mdlc", "mdlc.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.0",  # Config and output schemas
        "typer>=0.9,<0.26",  # CLI (0.26+ vendors its own click)
        "click",  # CLI exceptions (typer's engine)
        "rich",  # Terminal formatting
        "requests",  # Remote link checks
        "pyyaml",  # YAML output
        "pygments",  # Output highlighting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "mdlc=mdlc.cli:main",
        ],
    },
)
