"""Internal constants shared across the library."""

BASE_URL = "https://rituals.sense-company.com"
USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/51.0.2704.103 Safari/537.36"
)
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded;charset=UTF-8"

LOGIN_ENDPOINT = "/ocapi/login"
HUB_LIST_ENDPOINT = "/api/account/hubs/{account_hash}"
HUB_STATE_ENDPOINT = "/api/account/hub/{hub_hash}"
HUB_UPDATE_ENDPOINT = "/api/hub/update/attr"

# Persisted store keys
ACCOUNT_HASH_KEY = "rituals_account_hash"
HUB_HASH_KEY = "rituals_hub_hash"

DEFAULT_STORAGE_DIR = "./rituals_storage"

MANUFACTURER = "Rituals"
MODEL = "Perfume Genie"
