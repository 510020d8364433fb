from setuptools import find_namespace_packages, setup

# with open("README.md", "r") as fh:
#     long_description = fh.read()

setup(
    name="smg-dual",
    version="0.0.1",
    author="Stuart Golodetz",
    author_email="stuart.golodetz@cs.ox.ac.uk",
    description="Dual number algebras (dual reals, complex, hyper, super, perplex, quaternion and ultra variants)",
    long_description="",  #long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/sgolodetz/smg-dual",
    packages=find_namespace_packages(include=["smg.dual", "smg.dual.*"]),
    include_package_data=True,
    install_requires=[
        "numpy",
        "scipy"
    ],
    extras_require={
        "test": [
            "hypothesis",
            "pytest"
        ]
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.6',
)
