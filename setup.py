from pathlib import Path

from setuptools import find_packages, setup

version = (Path(__file__).parent / "ioshim/VERSION").read_text("ascii").strip()


install_requires = [
    "w3lib>=1.17.0",
    "zope.interface>=5.1.0",
]
extras_require = {
    "test": [
        "pytest",
        "testfixtures<12",
    ],
}


setup(
    name="ioshim",
    version=version,
    description="Typed stream providers over native I/O with pluggable error strategies",
    license="BSD",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={"ioshim": ["VERSION"]},
    zip_safe=False,
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Programming Language :: Python :: Implementation :: CPython",
        "Topic :: Software Development :: Libraries :: Python Modules",
        "Topic :: System :: Filesystems",
    ],
    python_requires=">=3.9",
    install_requires=install_requires,
    extras_require=extras_require,
)
