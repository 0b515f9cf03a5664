import pathlib

import setuptools

here = pathlib.Path(__file__).parent.resolve()

long_description = (here / "README.md").read_text(encoding="utf-8")

# `networks.yaml` and `logger.cfg` are read from the package directory.
setuptools.setup(
    long_description=long_description,
    long_description_content_type="text/markdown",
    zip_safe=False,
)
