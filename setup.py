from setuptools import find_packages, setup

setup(
    name="subsidia",
    version="0.1.0",
    description="Pure collection helpers (mapping, set, sequence) for generated code",
    packages=find_packages(include=["subsidia", "subsidia.*"]),
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
)
