from setuptools import setup, find_packages

setup(
    name="cannon",
    version="0.1.0",
    description="Distributed systems modelling tool: client latency and throughput under routing strategies",
    packages=find_packages(include=["cannon", "cannon.*"]),
    install_requires=[
        "matplotlib",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "cannon=cannon.cli:main",
        ],
    },
    include_package_data=True,
    python_requires=">=3.10",
)
