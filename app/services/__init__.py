# =============================================================================
# File: __init__.py
# Date: 2026-10-19
# Copyright (c) 2024 Goutam Malakar. All rights reserved.
# =============================================================================

# services package init
from . import health_service

__all__ = ["health_service"]
