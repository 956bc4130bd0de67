#!/usr/bin/env python
# encoding: utf-8

"""A setuptools based setup module."""

# pylint: disable=missing-function-docstring
import os
import glob
import shutil
import pathlib
from setuptools import setup, find_packages, Command


here = pathlib.Path(__file__).parent.resolve()

# Get the long description from the README file
long_description = (here / "README.md").read_text(encoding="utf-8")

class CleanCommand(Command):
    """Custom clean command to tidy up the project root."""
    CLEAN_FILES = ["./build", "./_build", "./dist", "./__pycache__", "**/*.egg-info", "./.pytest_cache"]

    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        for path_spec in self.CLEAN_FILES:
            # Make paths absolute and relative to this path
            abs_paths = glob.glob(os.path.normpath(os.path.join(here, path_spec)), recursive=True)
            for path in [str(p) for p in abs_paths]:
                if not path.startswith(str(here)):
                    # Die if path in CLEAN_FILES is absolute + outside this directory
                    raise ValueError(f"{path} is not a path inside {str(here)}")

                print(f'Removing {os.path.relpath(path)}')
                if os.path.isdir(path):
                    shutil.rmtree(path)
                else:
                    os.remove(path)

# Arguments marked as "Required" below must be included for upload to PyPI.
# Fields marked as "Optional" may be commented out.
setup(
    name = "tabfile",
    version = "0.1.0",
    description = "Read delimited text files line by line, with zero-copy access to the fields",
    long_description = long_description,
    long_description_content_type = "text/markdown",
    classifiers=[  # Optional
        # How mature is this project? Common values are
        #   3 - Alpha
        #   4 - Beta
        #   5 - Production/Stable
        "Development Status :: 4 - Beta",

        # Indicate who your project is intended for
        "Intended Audience :: Developers",
        "Intended Audience :: Information Technology",
        'Natural Language :: English',

        "Topic :: Software Development :: Libraries",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3 :: Only",
    ],
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "prettytable",
        "numpy",
        "pandas",
    ],
    extras_require={
        "test": ["pytest"],
    },
    cmdclass={
        'clean': CleanCommand,
    },
)
