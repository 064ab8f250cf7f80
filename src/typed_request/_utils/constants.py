# Environment variables
ENV_BASE_URL = "TYPED_REQUEST_BASE_URL"
ENV_TIMEOUT = "TYPED_REQUEST_TIMEOUT"

# Headers
HEADER_ACCEPT = "Accept"
HEADER_CONTENT_TYPE = "Content-Type"

# Content types
APPLICATION_JSON = "application/json"

# Defaults
DEFAULT_TIMEOUT = 30.0

# Error messages
MESSAGE_CREATE_FAILED = "failed to create request"
MESSAGE_SEND_FAILED = "failed to send request"
MESSAGE_DECODE_FAILED = "failed to decode response"
