# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="cclq",
    version="0.1.0",
    description="Parser, canonicalizer, merger and query tool for the CCL configuration notation",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["cclq", "cclq.*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        'console_scripts': [
            'cclq=cclq.main:main',  # Merge and query CCL files from the terminal
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
