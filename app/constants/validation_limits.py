"""输入校验/阈值常量.

集中管理 schema/settings 中的业务阈值, 避免 magic number 分散在各层.
"""

from __future__ import annotations

from typing import Final

# User signup
USER_NAME_MIN_LENGTH: Final[int] = 3
USER_PASSWORD_MIN_LENGTH: Final[int] = 6

# Invoice
AMOUNT_MINOR_UNITS_FACTOR: Final[int] = 100
AMOUNT_MAX_MINOR_UNITS: Final[int] = 2**31 - 1

# Password hashing
BCRYPT_LOG_ROUNDS_DEFAULT: Final[int] = 10
BCRYPT_LOG_ROUNDS_MIN: Final[int] = 4

# Listing
INVOICES_PER_PAGE_DEFAULT: Final[int] = 6
