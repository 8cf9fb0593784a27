"""
Catalog package for the local library site.

This package holds the author schema, the author collections (MongoDB
or the bundled sample data) and the author list page with its route.
Other catalogue pages (books, genres) are not part of this package.
"""

from .router import router as catalog_router  # noqa: F401
