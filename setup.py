import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="vgraph",
    version="0.1.0",
    author="vgraph developers",
    description="Breadth-first and A* search over virtual graphs.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(include=["vgraph", "vgraph.*"]),
    classifiers=[
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "frozendict>=2.3.8",
        "tqdm",
        "typing_extensions",
    ],
    extras_require={
        "test": [
            "numpy",
            "parameterized",
            "pytest",
        ],
    },
)
