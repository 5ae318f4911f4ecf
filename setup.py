import pathlib

from setuptools import setup

pkg_name = 'stream_histogram'
base_dir = pathlib.Path(__file__).parent
with open(base_dir / 'src' / pkg_name / '_version.py') as f:
    version_globals = {}
    exec(f.read(), version_globals)
    version = version_globals['__version__']

setup(
    name=pkg_name,
    description='Bounded-memory streaming histogram for Python',
    long_description='''
StreamHistogram summarizes an unbounded stream of numbers with a fixed
number of bins, giving approximate mean, variance, quantiles and CDF
along with exact min and max.

Use cases include:
  * latency tracking inside a long running service
  * percentile reporting where storing every sample is infeasible
  * timing a block of code or function with HistogramTimer
''',
    long_description_content_type='text/markdown',
    version=version,
    license='MIT',
    packages=[pkg_name],
    package_dir={'': 'src'},
    install_requires=[],
    extras_require={
        'test': ['pytest', 'numpy', 'trio'],
    },
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3 :: Only',
        'Programming Language :: Python :: 3.7',
    ],
)
