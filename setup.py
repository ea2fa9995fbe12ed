"""
Setup script for the mdcover backend
"""

import sys

try:
    from setuptools import setup, find_packages
except ImportError:
    print("ERROR: setuptools is not installed.")
    print("\nPlease install setuptools first:")
    print("  pip install setuptools")
    print("\nOr better yet, use pip to install this package directly:")
    print("  pip install -e .")
    raise SystemExit(1)

from pathlib import Path

# Read the README file
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

# Check if setup.py is being run without arguments
if len(sys.argv) == 1:
    print("=" * 70)
    print("NOTE: You're running setup.py without any commands.")
    print("=" * 70)
    print("\nThe recommended way to install this package is:")
    print("  pip install -e .")
    print("\n" + "=" * 70)
    sys.exit(0)

setup(
    name="mdcover",
    version="1.0.0",
    author="mdcover Team",
    author_email="contact@example.com",
    description="MiniDisc cover creator backend - search MusicBrainz releases and track listings",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    classifiers=[
        "Development Status :: 4 - Beta",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Framework :: Flask",
        "Topic :: Multimedia :: Sound/Audio",
        "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
    ],
    python_requires=">=3.8",
    install_requires=[
        "requests>=2.25.0",
        "flask>=2.2.0",
        "werkzeug>=2.2.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=6.0",
            "pytest-cov>=2.0",
            "black>=21.0",
            "flake8>=3.8",
            "mypy>=0.800",
        ],
    },
    entry_points={
        "console_scripts": [
            "mdcover-server=mdcover.main:main",
        ],
    },
    include_package_data=True,
    zip_safe=False,
)
