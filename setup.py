""" bip85 build script for setuptools.

"""

from setuptools import find_packages, setup  # type: ignore

with open("README.md", "r", encoding="ascii") as file_:
    longdescription = file_.read()

setup(
    name="bip85",
    version="2023.7.12",
    license="MIT License",
    author="The bip85 developers",
    description="Deterministic entropy from BIP32 keychains (BIP85)",
    long_description=longdescription,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=["btclib>=2023.2.3,<2024", "pycryptodome>=3.10"],
    extras_require={
        "secp256k1": ["btclib_libsecp256k1"],
        "test": ["pytest"],
    },
    keywords=(
        "bitcoin bip85 bip32 bip39 deterministic-entropy wif xprv "
        "password dice rsa"
    ),
    python_requires=">=3.8",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Topic :: Security :: Cryptography",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
)
