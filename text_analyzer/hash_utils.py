# Text Analyzer
# © 2026 Dennis Schulmeister-Zimolong <dennis@wpvs.de>
#
# This source code is licensed under the BSD 3-Clause License found in the
# LICENSE file in the root directory of this source tree.

from __future__ import annotations

"""Short stable digests for spreadsheet style and database-range names."""

import hashlib


def md5_text(text: str) -> str:
    """Return the lowercase hex MD5 digest of `text` (UTF-8 encoded)."""

    # Not a security use; keeps working on FIPS-enabled OpenSSL builds.
    return hashlib.md5(text.encode("utf-8"), usedforsecurity=False).hexdigest()
