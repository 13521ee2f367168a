from setuptools import setup

# All metadata is declared in 'pyproject.toml'
setup()
