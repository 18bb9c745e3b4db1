from setuptools import find_packages, setup

setup(
    name="clawpanel",
    version="0.1.0",
    description="Control panel for the OpenClaw gateway - service lifecycle, skills and configuration",
    packages=find_packages(include=["clawpanel", "clawpanel.*"]),
    python_requires=">=3.10",
    install_requires=[
        "typer",  # CLI
        "pydantic>=2",  # Config and output schemas
        "rich",  # Terminal formatting
        "PyYAML",  # YAML output and SKILL.md front matter
        "psutil",  # Operation lock holder liveness
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
    entry_points={
        "console_scripts": [
            "clawpanel=clawpanel.cli:main",
        ],
    },
)
