import re, setuptools, os.path

description = "Pays a settlement account through several lightning network " \
              "daemon (LND) channels at once."
if os.path.exists("README.md"):
    with open("README.md", "r") as fh:
        long_description = fh.read()
else:
    long_description = description

with open("./lndpay/__init__.py", "r") as f:
    MATCH_EXPR = "__version__[^'\"]+(['\"])([^'\"]+)"
    VERSION = re.search(MATCH_EXPR, f.read()).group(2)

# package:
# (venv) pip install build setuptools wheel sdist twine
# (venv) python3 -m build

setuptools.setup(
    name="lndpay",
    version=VERSION,
    description=description,
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires='>=3.9.0',
    install_requires=[
        "grpcio>=1.60.0",
        "protobuf>=4.24.0",
    ],
    extras_require={
        "test": [
            "lnregtest>=0.2.2",
            "pytest",
        ]
    },
    package_data={
        "lndpay": ["templates/*.ini"],
    },
    include_package_data=True,
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
