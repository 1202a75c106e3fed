"""
Service Constants (Single Source of Truth)

정적 상수 정의 - 빌드 타임에 결정되며 환경변수로 변경되지 않음
"""

# =============================================================================
# Service Identity
# =============================================================================
SERVICE_NAME = "age-gate-api"
SERVICE_VERSION = "1.5.0"

# =============================================================================
# Logging Constants (12-Factor App Compliance)
# =============================================================================
# Environment variable keys
ENV_KEY_ENVIRONMENT = "ENVIRONMENT"
ENV_KEY_LOG_LEVEL = "LOG_LEVEL"
ENV_KEY_LOG_FORMAT = "LOG_FORMAT"

# Default values
DEFAULT_ENVIRONMENT = "dev"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

# ECS (Elastic Common Schema) version
ECS_VERSION = "8.11.0"

# LogRecord attributes to exclude from extra fields
# Reference: https://docs.python.org/3/library/logging.html#logrecord-attributes
EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

# =============================================================================
# PII Masking Configuration
# =============================================================================
# Sensitive field names (case-insensitive substring matching)
SENSITIVE_FIELD_PATTERNS = frozenset(
    {
        "password",
        "secret",  # oneid_client_secret
        "token",  # access_token, id_token, admin_token
        "code",  # authorization code, code_verifier
        "authorization",  # HTTP Authorization header
    }
)

# Masking placeholder
MASK_PLACEHOLDER = "***REDACTED***"

# Partial masking settings
MASK_PRESERVE_PREFIX = 4
MASK_PRESERVE_SUFFIX = 4
MASK_MIN_LENGTH = 10

# =============================================================================
# OneID Provider
# =============================================================================
ONEID_PROVIDER_URLS = {
    "sandbox": "https://controller.sandbox.myoneid.co.uk",
    "production": "https://controller.myoneid.co.uk",
}

# 레거시 플러그인 호환 쿼리 마커
LEGACY_START_MARKER = "oneid-auth-start"
LEGACY_CALLBACK_MARKER = "oneid-callback"
