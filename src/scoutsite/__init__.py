"""
Walkham Valley Scouts - website support package.

The ``osm`` subpackage is the typed client for the Online Scout Manager API
that supplies the programme and badge data shown on the site.
"""

__version__ = "0.1.0"
