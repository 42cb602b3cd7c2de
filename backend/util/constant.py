from typing import Final

# RESPONSE STRING
RESPONSE_HEALTHCHECK_OK: Final[str] = 'ok'

# ERROR STRING
ERR_SERVER_ERROR: Final[str] = 'Server error'
ERR_FLAVOR_NOT_FOUND: Final[str] = 'Flavor not found'
