import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="flask-find-or-create",
    version="0.1.0",
    description="Atomic find-or-create, with optional upsert, for MongoDB models.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(),
    package_data={"findorcreate.settings": ["*.conf"]},
    install_requires=[
        "Flask",
        "jsonschema",
        "pymongo>=4",
    ],
    extras_require={
        "test": [
            "mongomock>=4.1",
            "pytest",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
    ],
    python_requires=">=3.8",
)
