# =============================================================================
# File: settings_catalog.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

# Settings the server cannot start without, in reporting order.
REQUIRED_SETTINGS = (
    "PORT",
    "JWT_SECRET",
    "TELEGRAM_BOT_TOKEN",
    "TELEGRAM_CHAT_ID",
)

# Settings only listed as informational when absent in development.
OPTIONAL_SETTINGS = (
    "NODE_ENV",
    "MONGODB_URI",
    "SMTP_HOST",
    "SMTP_PORT",
    "SMTP_USER",
    "SMTP_PASS",
    "RATE_LIMIT_WINDOW_MS",
    "RATE_LIMIT_MAX_REQUESTS",
    "ALLOWED_ORIGINS",
    "ENCRYPTION_KEY",
)

DEFAULT_JWT_SECRET = "play-kids-secret-key"
EXAMPLE_JWT_SECRET_MARKER = "your_super_secret"
EXAMPLE_BOT_TOKEN_MARKER = "your_bot_token"

MIN_JWT_SECRET_LENGTH = 32
MIN_PORT = 1
MAX_PORT = 65535
MIN_RATE_LIMIT_WINDOW_MS = 1000
MIN_RATE_LIMIT_MAX_REQUESTS = 1

PRODUCTION = "production"
DEVELOPMENT = "development"
