import codecs
import os
import re
import setuptools


here = os.path.abspath(os.path.dirname(__file__))


def read(*parts):
    # intentionally *not* adding an encoding option to open, See:
    #   https://github.com/pypa/virtualenv/issues/201#issuecomment-3145690
    with codecs.open(os.path.join(here, *parts), 'r') as fp:
        return fp.read()


def find_version(*file_paths):
    version_file = read(*file_paths)
    version_match = re.search(r"^__version__ = ['\"]([^'\"]*)['\"]",
                              version_file, re.M)
    if version_match:
        return version_match.group(1)
    raise RuntimeError("Unable to find version string.")


setuptools.setup(
    name='quadindex',
    version=find_version('src/quadindex', '__init__.py'),
    author="QuadIndex developers",
    packages=['quadindex'],
    package_dir={'quadindex': 'src/quadindex'},
    license='GPLv3+',
    description="Point quadtree with pluggable keyed storage.",
    long_description=read('README'),
    python_requires=">=3.6",
    install_requires=[
        "toolz >= 0.7.4",
        "numpy",
        "pandas",
        "msgpack >= 1.0",
    ],
    extras_require={
        "redis": ["redis"],
        "test": ["pytest", "fakeredis"],
    },
)
