"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one domain
(users, tasks, health).  The routers are aggregated in ``router.py``
and then included in the main application.
"""
