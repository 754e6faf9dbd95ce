# setup.py
from setuptools import setup, find_packages

setup(
    name="sty_analyzer",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "construct>=2.10",
        "numpy>=1.21",
        "Pillow>=9.0",
        "tqdm>=4.60",
    ],
    extras_require={
        "tests": ["pytest>=7.0.0"],
    },
    python_requires=">=3.8",
    author="akspa0",
    author_email="akspa0@immoralhole.com",
    description="A tool for decoding GTA2 style (.sty) files into palettes, tiles and sprites",
    keywords="gta2, sty, style, sprites, palette",
    entry_points={
        'console_scripts': [
            'export-sty=sty_analyzer.main:main',
        ],
    }
)
