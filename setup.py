from setuptools import setup, find_packages

# Test and install dependencies kept together - pytest is lightweight.
setup(name="linearna", version=0.1, description="Numeric vectors with paired in-place and value-returning operations",
      packages=find_packages(),
      install_requires=['numpy', 'pyyaml', 'pytest'], python_requires='>=3.7')
