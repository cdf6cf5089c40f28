"""
Constraints shared by several schemas.

Ids are stored in SQLite ``INTEGER`` columns, which hold signed 64-bit
values.  Larger numbers cannot even be bound as query parameters, so
they are rejected during request validation.
"""

ID_MIN = -(2**63)
ID_MAX = 2**63 - 1
