"""Constants for the NS API adapter.

API portal: https://apiportal.ns.nl/
All endpoints require an ``Ocp-Apim-Subscription-Key`` header.
"""

NS_BASE_URL = "https://gateway.apiportal.ns.nl"

# Paths relative to the base URL
JOURNEYS_PATH = "/reisinformatie-api/api/v2/{journey_type}"  # departures | arrivals
JOURNEY_DETAILS_PATH = "/reisinformatie-api/api/v2/journey"  # ?train=...
DISRUPTIONS_PATH = "/reisinformatie-api/api/v3/disruptions/station/{station_code}"
COMPOSITION_PATH = "/virtual-train-api/v1/trein/{train_number}/{station_code}"

SUBSCRIPTION_KEY_HEADER = "Ocp-Apim-Subscription-Key"

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Cache-Control": "no-cache",
}

DEFAULT_LANGUAGE = "en"
DEFAULT_MAX_JOURNEYS = 50

# Maximum number of characters of an upstream body kept in logs and errors
MAX_LOGGED_BODY_LENGTH = 500
