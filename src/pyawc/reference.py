"""Reference values

No functional code found within this module, just a bunch of statics

.. data:: METAR_ENDPOINT

    The AWC Text Data Server URL with the fixed parameters selecting the
    METAR data source, the retrieve request type and XML output.

"""

METAR_ENDPOINT = (
    "https://aviationweather.gov/adds/dataserver_current/httpparam?"
    "dataSource=metars&requestType=retrieve&format=xml"
)

# Geographic bounds enforced on spatial constraints
LATITUDE_BOUNDS = (-90.0, 90.0)
LONGITUDE_BOUNDS = (-180.0, 180.0)
# Statute miles, the server refuses anything larger
RADIUS_BOUNDS = (0.0, 500.0)
