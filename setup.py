from setuptools import setup, find_packages

setup(
    name="exactmath",
    version="1.0",
    description="Arbitrary-precision linear algebra and complex numbers",
    long_description=("Immutable vectors and matrices over big integers, big decimals and complex numbers, with exact "
                      "determinants, norms with arbitrary-precision square roots and structural predicates"),
    long_description_content_type="text/plain",
    license="Apache License 2.0",
    python_requires=">=3.8",
    packages=find_packages(include=["exactmath", "exactmath.*"]),
    install_requires=["numpy", "sympy"],
    extras_require={"tests": ["pytest"]},
    classifiers=[
        "Intended Audience :: Science/Research", "Development Status :: 3 - Alpha", "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10", "Programming Language :: Python :: 3.11", "Programming Language :: Python :: 3.12",
        "Natural Language :: English", "Operating System :: OS Independent", "Topic :: Scientific/Engineering :: Mathematics"
    ],
    keywords=["linear algebra", "arbitrary precision", "complex numbers", "determinant"],
    zip_safe=False,
)
