"""Constants for the NS reisinformatie API adapter.

API portal: https://apiportal.ns.nl/
Authentication via a subscription key header.
"""

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"

# HTTP headers
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Query parameter names
TRAIN_PARAM = "train"  # GET /v2/journey?train=...

# Response envelope keys
TRIPS_KEY = "trips"
PAYLOAD_KEY = "payload"
