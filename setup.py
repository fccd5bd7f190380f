from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="picosr25519",
        version="0.1.0",
        description="Picosr25519 sr25519 signatures and HD key derivation",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.9",
        install_requires=[
            "py-sr25519-bindings>=0.2.0",
            "py-bip39-bindings>=0.1.11",
        ],
        extras_require={"test": ["pytest>=7"]},
    )
