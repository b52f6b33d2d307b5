"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one concern
(the meetup resource, the informational pages).  The routers are
aggregated in ``api/router.py`` and then included in the main
application.
"""
