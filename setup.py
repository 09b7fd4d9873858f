from pathlib import Path
from setuptools import setup, find_packages


def read_readme() -> str:
    readme_path = Path(__file__).resolve().parent / "README.md"
    return readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""


setup(
    name="pwcrypt",
    version="1.2.0",
    packages=find_packages(include=["pwcrypt", "pwcrypt.*"]),
    install_requires=[
        "cryptography>=41.0.0",
        "colorama>=0.4.6",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "pwcrypt=pwcrypt.main:main",
        ],
    },
    python_requires=">=3.10",
    description="Encrypt or decrypt a file with AES-256-CBC and a password-derived key",
    long_description=read_readme(),
    long_description_content_type="text/markdown",
)
