import sys
import importlib.util
from pathlib import Path
from setuptools import setup, find_packages

requirements = dict()
for extra in ["dev", "main"]:
    requirements[extra] = [r
                           for r in Path("requirements/%s.txt" % extra).read_text().splitlines()
                           if r and '@' not in r
                           ]

if sys.version_info < (3, 8, 0):
    raise ValueError("recipekit requires Python 3.8 or newer.")

# Find version number
spec = importlib.util.spec_from_file_location("recipekit.pkginfo", str(Path(__file__).parent / "recipekit" / "pkginfo.py"))
pkginfo = importlib.util.module_from_spec(spec)
spec.loader.exec_module(pkginfo)
version = pkginfo.version
package_name = pkginfo.package_name


# The directory containing this file
HERE = Path(__file__).parent

# The text of the README file
README = (HERE / "README.md").read_text()

setup(name=package_name,
      version=version,
      long_description=README,
      long_description_content_type="text/markdown",
      description='recipekit: declarative preprocessing recipes with kernel PCA signal extraction.',
      keywords='preprocessing; feature engineering; kernel PCA',
      packages=find_packages(exclude=['docs', 'examples', 'test']),
      license="MIT",
      install_requires=requirements["main"],
      extras_require={"dev": requirements["dev"]},
      python_requires='>=3.8.0',
      )
