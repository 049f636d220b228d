import os
from setuptools import setup


src_version = os.path.join(os.path.dirname(__file__), "strcalc", "version.py")
with open(src_version) as f:
    version = f.read().strip().split()[-1][1:-1]


setup(
    name="string-calculator",
    version=version,
    description="Add up the numbers in a delimited string",
    long_description=open("README.rst").read(),
    long_description_content_type="text/x-rst",
    packages=["strcalc"],
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Topic :: Software Development :: Libraries",
    ],
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "pytest-raisin",
        ],
    },
)
