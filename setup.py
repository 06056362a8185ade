import os
from setuptools import setup, find_packages
from pathlib import Path

version = '0.1.0'

try:
    if not os.getenv('RELEASE'):
        from datetime import date
        today = date.today()
        day = today.strftime("b%Y%m%d")
        version += day
except Exception:
    pass


this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()


if __name__ == '__main__':
    install_requires = [
        'PyYAML>=5.1',
    ]

    setup(name=("csvjson"),
          version=version,
          author="The MITRE Corporation",
          description="Small command-line utilities: streaming CSV to JSON conversion and a hello demo",
          long_description=long_description,
          long_description_content_type='text/markdown',
          license='Apache',
          classifiers = [
              "Programming Language :: Python :: 3",
              "License :: OSI Approved :: Apache Software License",
              "Operating System :: OS Independent"
          ],
          python_requires='>=3.8',
          install_requires=install_requires,
          extras_require={'test': ['pytest']},
          packages=find_packages(exclude=['tests', 'tests.*']))
