from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="stopgraph",
    version="0.1.0",
    description="All-routes finder for small bus-stop networks.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "examples")),
    python_requires=">=3.9",
    install_requires=["numpy", "pyyaml", "networkx"],
    extras_require={"test": ["pytest"]},
    tests_require=["pytest"],
    entry_points={"console_scripts": ["stopgraph=stopgraph.cli:main"]},
)
