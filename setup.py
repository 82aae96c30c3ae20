from pathlib import Path

from setuptools import setup

exec(Path('colourblend/_metadata.py').read_text(), meta := dict[str, str]())

with open('requirements.txt', encoding='utf-8') as fh:
    reqs = fh.readlines()

with open('requirements-dev.txt', encoding='utf-8') as fh:
    reqs_dev = fh.readlines()

with open('README.md', encoding='utf-8') as fh:
    long_description = fh.read()

setup(
    name='colourblend',
    author='Antonio Strippoli',
    author_email='clarantonio98@gmail.com',
    description='Immutable colour values with RGB, HSV, HSL, XYZ, Yxy, L*a*b* and L*u*v* conversions and channel-wise blending.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    version=meta['__version__'],
    packages=['colourblend'],
    package_data={
        'colourblend': ['py.typed'],
    },
    python_requires='>=3.9',
    install_requires=reqs,
    extras_require={'dev': reqs_dev},
    keywords='colour color rgb hsv hsl xyz cie lab luv blend compositing',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'License :: OSI Approved :: GNU Lesser General Public License v3 or later (LGPLv3+)',
    ],
    license='GNU LGPL 3.0 or later',
)
