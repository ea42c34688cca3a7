
from setuptools import setup, find_packages
setup(
    name="probe_harness",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=["numpy", "zstandard"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["hashtable-test=probe_harness.cli:main"]},
    python_requires=">=3.10",
)
