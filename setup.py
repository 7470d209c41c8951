from setuptools import setup, find_packages


with open('chordvery/_version.py') as f:
    for line in f.readlines():
        if '__version__ =' in line:
            exec(line)


with open('README.md') as f:
    readme = f.readlines()
readme = ''.join(readme[1:])  # Skip the first line


setup(
    name="chordvery",
    version=__version__,
    author="Satoshi Nishimura",
    author_email='nisim@u-aizu.ac.jp',
    description="A chord recognizer for MIDI input with chord progression suggestions",
    long_description=readme,
    long_description_content_type='text/markdown',
    keywords="MIDI, chord recognition, chord progression, harmony",
    license="BSD-3-Clause",
    python_requires=">=3.6",
    install_requires=["mido>=1.3"],
    extras_require={
        "rtmidi": ["python-rtmidi"],
        "test": ["pytest"],
    },
    packages=find_packages(),
    entry_points={
        "console_scripts": [
            "chordvery = chordvery.chordverycmd:main",
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'License :: OSI Approved :: BSD License',
        'Operating System :: MacOS :: MacOS X',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: POSIX :: Linux',
        'Topic :: Multimedia :: Sound/Audio :: MIDI',
    ],
)
