"""Setup configuration for runstats"""

from setuptools import setup, find_packages

setup(
    name="workflow-runs-stats",
    version="0.1.0",
    description=(
        "Aggregate statistics for GitHub Actions workflow runs: outcome rates "
        "and successful-run duration distribution."
    ),
    author="Workflow Runs Stats Contributors",
    author_email="",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "black>=22.0",
            "flake8>=4.0",
            "mypy>=0.950",
        ],
    },
)
