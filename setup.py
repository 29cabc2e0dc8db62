# setup.py
from setuptools import setup, find_packages

setup(
    name="threshold-logic",
    version="0.1.0",
    description="Threshold logic function identification via integer linear programming",
    author="Randy Davila",
    author_email="rrd6@rice.edu",
    package_dir={"": "src"},
    packages=find_packages(where="src"),      # automatically finds your modules
    install_requires=[
        "pandas>=2.3.0",
        "numpy>=1.23",
        "scipy>=1.9",    # scipy.optimize.milp
        "pulp>=2.7",
    ],
    extras_require={
        "test": ["pytest>=7"],
    },
    python_requires=">=3.9",
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
