
import io
import re
import setuptools

with io.open('src/auto_pip/__init__.py', encoding='utf8') as fp:
  version = re.search(r"__version__\s*=\s*['\"](.*)['\"]", fp.read()).group(1)

with io.open('README.md', encoding='utf8') as fp:
  long_description = fp.read()

requirements = [
  'cleo >=2.0.0,<3.0.0',
  'databind >=4.4.0,<5.0.0',
  'importlib-metadata >=4.4',
  'poetry-core >=1.5.0,<2.0.0',
  'twine >=4.0.0',
  'wheel >=0.37.0',
]

setuptools.setup(
  name = 'auto-pip',
  version = version,
  author = 'Niklas Rosenstein',
  author_email = 'rosensteinniklas@gmail.com',
  description = 'Version bumping and Twine publishing of setup.cfg based Python packages for release automation.',
  long_description = long_description,
  long_description_content_type = 'text/markdown',
  license = 'MIT',
  packages = setuptools.find_packages('src', ['test', 'test.*', 'docs', 'docs.*']),
  package_dir = {'': 'src'},
  include_package_data = False,
  install_requires = requirements,
  extras_require = {
    'test': ['pytest >=6.2.0'],
  },
  tests_require = [],
  python_requires = '>=3.8',
  data_files = [],
  entry_points = {
    'console_scripts': [
      'auto-pip = auto_pip.__main__:main',
    ],
    'auto.plugins': [
      'pip = auto_pip.plugin:PipPlugin',
    ],
  }
)
