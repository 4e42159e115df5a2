import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

with open("zint/version.py", "r") as fh:
    version = fh.read().strip().strip('"')

setuptools.setup(
    name="zint",
    version=version,
    description="Arbitrary precision integers with a machine-word fast path. Arithmetic, bits, primes, conversions.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    platforms=['any'],
    python_requires='>=3.8',
    # NOTE:  3.8 for math.isqrt
    extras_require={
        'test': ['hypothesis'],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Intended Audience :: Science/Research",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
        "Topic :: Software Development :: Libraries :: Python Modules",
            # bignum
            # multiprecision
            # number theory
    ],
)
