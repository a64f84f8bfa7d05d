"""Wire-level constants for the DineTime Enterprise API."""

DEFAULT_BASE_URL = "https://api.dinetime.com"
DEFAULT_TIMEOUT = 30.0

# Authorization scheme name and signature-version header value.
SIGNATURE_VERSION = "dinetime-sv2-hmac-sha1"

# Label that opens the string-to-sign.
SIGNING_ALGORITHM = "HMAC-SHA1"

# Algorithm advertised inside the Authorization header.
AUTH_HASH_ALGORITHM = "SHA256"

HEADER_AUTHORIZATION = "Authorization"
HEADER_TIMESTAMP = "x-dinetime-timestamp"
HEADER_SIGNATURE_VERSION = "x-dinetime-signature-version"

JSON_CONTENT_TYPE = "application/json"

# Page sizes reported by the API for time-ordered collections.
EVENTS_PAGE_SIZE = 100
VISITS_PAGE_SIZE = 30
