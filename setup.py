from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="lazyspf",
    version="0.1.0",
    author="Andrey Golovanov",
    description="Shortest paths in directed graphs discovered on demand.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/networmix/lazyspf",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*", "dev", "dev.*")),
    python_requires=">=3.9",
    install_requires=["networkx>=3.0"],
    extras_require={"test": ["pytest", "pytest-benchmark", "networkx"]},
    tests_require=["pytest", "pytest-benchmark", "networkx"],
    entry_points={"console_scripts": ["lazyspf=lazyspf.cli:main"]},
)
