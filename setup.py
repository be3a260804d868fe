from setuptools import find_packages, setup


def parse_requirements(filename):
    with open(filename) as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]


setup(
    name="pyimgproc",
    version="0.1.0",
    description="Load, transform and re-encode raster and SVG images with a small chainable API.",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",

    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=parse_requirements("requirements.txt"),
    extras_require={
        "test": [
            "pytest",
        ],
    },
    entry_points={
        "console_scripts": [
            "pyimgproc=pyimgproc.cli:main",
        ],
    },
    python_requires=">=3.10",
)
