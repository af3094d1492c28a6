# Environment variables
ENV_HTTP_ADAPTER = "NOSTO_HTTP_ADAPTER"

# Headers
HEADER_AUTHORIZATION = "Authorization"
HEADER_CONTENT_TYPE = "Content-type"
HEADER_CONTENT_LENGTH = "Content-Length"
HEADER_USER_AGENT = "User-Agent"

# Auth types
AUTH_BASIC = "basic"
AUTH_BEARER = "bearer"

# Adapters
ADAPTER_AUTO = "auto"
ADAPTER_HTTPX = "httpx"
ADAPTER_SOCKET = "socket"

USER_AGENT = "Nosto.Python.Http"
