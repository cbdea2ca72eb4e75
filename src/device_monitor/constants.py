"""Fixed scheduling and retry constants for the device monitor."""

HEARTBEAT_INTERVAL_SECONDS = 300.0
STATUS_CHECK_INTERVAL_SECONDS = 10.0

MAX_CONNECT_ATTEMPTS = 3
RETRY_DELAY_SECONDS = 2.0

DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
DEFAULT_API_BASE_URL = "https://haveibeenpwned.com/api/v2"
DEFAULT_TEST_ACCOUNT = "test@example.com"

DEVICE_SERIAL_NUMBER = "SN123456789"
NOT_FOUND_PLACEHOLDER = "Not found"

SERVICE_NAME = "device_monitor"

EXIT_MONITORING_STARTED = 0
EXIT_STARTUP_FAILED = 1
