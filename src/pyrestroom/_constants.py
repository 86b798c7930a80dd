"""Internal constants shared across the library."""

BASE_URL = "https://www.refugerestrooms.org"
USER_AGENT = "pyrestroom/0 (+https://www.refugerestrooms.org/api/docs)"
BY_LOCATION_ENDPOINT = "/api/v1/restrooms/by_location"

DEFAULT_PER_PAGE = 10
MAX_PER_PAGE = 100
DEFAULT_REQUEST_TIMEOUT = 15.0

# Mean Earth radius used for haversine distances.
EARTH_RADIUS_M = 6_371_008.8
