"""
libotp setup script
"""
#=============================================================================
# init script env -- ensure cwd = root of source dir
#=============================================================================
import os
import re
root_dir = os.path.abspath(os.path.join(__file__, ".."))
os.chdir(root_dir)

#=============================================================================
# imports
#=============================================================================
from setuptools import setup, find_packages

#=============================================================================
# version string
#=============================================================================

# pull version string from libotp, without importing it
# (runtime dependencies may not be installed yet)
with open(os.path.join(root_dir, "libotp", "__init__.py")) as fh:
    version = re.search(r'^__version__ = "(.+)"$', fh.read(), re.M).group(1)

#=============================================================================
# static text
#=============================================================================
SUMMARY = "HOTP / TOTP one-time password generation and validation"

DESCRIPTION = """\
libotp generates and validates one-time numeric passwords derived from a
shared secret, using HMAC-based dynamic truncation (RFC 4226, HOTP) and its
time-windowed variant (RFC 6238, TOTP), which tolerates clock drift between
the two parties.

It also renders ``otpauth://`` provisioning uris for authenticator apps.
"""

KEYWORDS = """\
otp hotp totp 2fa rfc4226 rfc6238
one-time password authenticator
"""

CLASSIFIERS = """\
Intended Audience :: Developers
License :: OSI Approved :: BSD License
Natural Language :: English
Operating System :: OS Independent
Programming Language :: Python :: 3
Programming Language :: Python :: Implementation :: CPython
Programming Language :: Python :: Implementation :: PyPy
Topic :: Security :: Cryptography
Topic :: Software Development :: Libraries
""".splitlines()

if '.dev' in version:
    CLASSIFIERS.append("Development Status :: 3 - Alpha")
else:
    CLASSIFIERS.append("Development Status :: 4 - Beta")

#=============================================================================
# run setup
#=============================================================================
setup(
    # package info
    packages=find_packages(root_dir, include=["libotp", "libotp.*"]),
    zip_safe=True,
    python_requires=">=3.9",

    # metadata
    name="libotp",
    version=version,
    license="BSD",

    description=SUMMARY,
    long_description=DESCRIPTION,
    keywords=KEYWORDS,
    classifiers=CLASSIFIERS,

    install_requires=[
        "typing_extensions>=4.6",
    ],
    extras_require={
        "tests": [
            "pytest>=7",
            "pytest-archon>=0.0.6",
        ],
    },
)

#=============================================================================
# eof
#=============================================================================
