import io
import os
import re
import setuptools


HERE = os.path.abspath(os.path.dirname(__file__))
VERSION_RE = re.compile(r"^__version__ = ['\"]([^'\"]*)['\"]", re.M)


def read(*parts):
    with io.open(os.path.join(HERE, *parts), encoding="utf-8") as fp:
        return fp.read()


def find_version(*file_paths):
    """Version declared in the package's __init__ module."""
    match = VERSION_RE.search(read(*file_paths))
    if match is None:
        raise RuntimeError(
            "No __version__ found in {}".format(os.path.join(*file_paths)))
    return match.group(1)


setuptools.setup(
    name='bsptree',
    version=find_version('src/bsptree', '__init__.py'),
    author="Thomas Zamojski",
    author_email="thomas.zamojski@datastorm.fr",
    packages=['bsptree'],
    package_dir={'bsptree': 'src/bsptree'},
    license='GPLv3+',
    description="Binary space partitioning of a rectangle with a focus "
                "cursor.",
    long_description=read('README'),
    python_requires=">=3.6",
    install_requires=[
        "numpy >= 1.13",
        "toolz >= 0.7.4",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
