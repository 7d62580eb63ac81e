from setuptools import setup, find_packages

setup(
    name="asciidraw",
    version="0.1.0",
    description="A line-oriented interpreter that draws shapes on a text grid",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
        "prompt-toolkit",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": ["asciidraw=asciidraw.__main__:main"],
    },
    python_requires=">=3.11",
)
