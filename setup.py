from setuptools import setup, find_packages

setup(
    name="clapper",
    version="0.1.0",
    description="getopt(3)-style command-line parsing with sub-commands, inverted flags and variadic arguments.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        "rich",
        "pydantic>=2",
        "pyyaml",
        "toml",
        "python-json-logger>=3.1",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "clapper-demo = clapper.__main__:run",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
