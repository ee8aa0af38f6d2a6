from setuptools import setup, find_packages

setup(
    name="argsift",
    version="0.1.0",
    description="Heuristic command-line token classifier: positionals, flags and parameters.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    author="Roland Thomas Jr",
    author_email="roland@rtj.dev",
    packages=find_packages(include=["argsift", "argsift.*"]),
    python_requires=">=3.10",
    install_requires=[
        "python-dateutil>=2.8",
        "python-json-logger>=3.1",
        "rich>=13.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": ["argsift=argsift.__main__:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Development Status :: 3 - Alpha",
    ],
)
