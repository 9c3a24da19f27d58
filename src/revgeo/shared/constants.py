"""
RevGeo shared constants

Coordinate reference systems, the Mapbox endpoint contract and server
defaults used across the project.
"""

# ─── Coordinate Reference Systems ─────────────────────────
EPSG_WGS84 = "EPSG:4326"          # geographic lat/lng
EPSG_UTM_NORTH_BASE = 32600       # WGS84 / UTM zone N  -> 32600 + zone
EPSG_UTM_SOUTH_BASE = 32700       # WGS84 / UTM zone S  -> 32700 + zone
UTM_ZONE_RANGE = (1, 60)

# ─── Mapbox Reverse Geocoding ─────────────────────────────
# https://docs.mapbox.com/api/search/geocoding/#reverse-geocoding
MAPBOX_ENDPOINT = "https://api.mapbox.com/geocoding/v5/mapbox.places"
QUERY_TYPE_ADDRESS = "address"
REQUEST_HEADERS = {"Content-Type": "application/json"}

# ─── Server ───────────────────────────────────────────────
API_VERSION = "1.0"
DEV_PORT = 8000
