import setuptools

# Use setup() with minimal configuration since pyproject.toml handles most metadata
setuptools.setup(
    scripts=['bin/quarrel-copy'],
)
