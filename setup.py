from setuptools import setup

setup(name="url-escape",
  version="0.1",
  description="Percent-encoding and percent-decoding of text for the parts of a URL.",
  license="MIT",
  packages=["url_escape"],
  package_dir={'url_escape': 'src'},
  install_requires=["click"],
  extras_require={"test": ["pytest"]},
  python_requires="~=3.9",
  entry_points="""
    [console_scripts]
    url-escape=url_escape.cli:cli
  """)
