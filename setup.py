# setup.py
from setuptools import setup, find_packages

setup(
    name="wasm-test-runner",
    version="0.1.0",
    description="Run the WebAssembly test suites of every package in a workspace",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'wasm-test-runner=wasm_test_runner.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
