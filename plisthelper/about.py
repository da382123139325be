# encoding: utf-8
"""Package metadata for plisthelper, readable without importing it."""

__packages__ = ['plisthelper']
__version__ = '0.3'
__author__ = 'The plisthelper developers'
__description__ = 'Read and write Xcode-compatible .plist files.'
__license__ = 'BSD'
__platforms__ = 'any'
__install_requires__ = ['openstep-plist']
__extras_require__ = {
    'native': ['pyobjc-framework-Cocoa; sys_platform == "darwin"'],
    'test': ['pytest'],
}
__classifiers__ = [
  'Development Status :: 4 - Beta',
  'Intended Audience :: Developers',
  'License :: OSI Approved :: BSD License',
  'Operating System :: OS Independent',
  'Programming Language :: Python :: 3',
  'Topic :: Software Development :: Libraries :: Python Modules',
]
