from setuptools import find_packages, setup

setup(
    name="unitard",
    version="0.1.0",
    description="Deploy the running binary as a systemd user service",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    package_data={
        "unitard": ["templates/*.service"],
    },
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",  # Descriptor and option models
        "jinja2",  # Unit file template rendering
        "typer",  # Embeddable CLI
        "rich",  # Terminal formatting
    ],
    extras_require={
        "test": [
            "pytest>=7.0",  # Testing framework
            "pytest-timeout>=2.1",  # Test timeouts
        ],
    },
)
