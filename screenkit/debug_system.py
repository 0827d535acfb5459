"""
Debug system for ScreenKit.
Provides switchable, categorised debug logging for layout builds and async requests.
"""

import os
import logging
from typing import Optional, Dict, Any
from datetime import datetime, timezone
from flask import current_app, request, has_app_context, has_request_context
from flask_login import current_user


class DebugManager:
    """Manages debug mode state and logging."""

    def __init__(self):
        self.logger = logging.getLogger('screenkit.debug')

        # Set up debug logger with specific formatting
        if not self.logger.handlers:
            handler = logging.StreamHandler()
            formatter = logging.Formatter(
                '[%(asctime)s] %(levelname)s - %(name)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)
            self.logger.setLevel(logging.DEBUG)

    def is_debug_enabled(self) -> bool:
        """Check if debug mode is enabled by app config or PANEL_DEBUG env."""
        if has_app_context():
            configured = current_app.config.get('PANEL_DEBUG')
            if configured is not None:
                return bool(configured)
        debug_state = os.getenv('PANEL_DEBUG', 'false')
        return debug_state.lower() in ['true', 'on', '1']

    def log_debug(self, message: str, category: str = "GENERAL", extra_data: Optional[Dict[str, Any]] = None):
        """Log debug message with category and optional extra data."""
        if not self.is_debug_enabled():
            return

        user_id = 'anonymous'
        request_path = None

        if has_request_context():
            request_path = request.path
            try:
                if current_user and current_user.is_authenticated:
                    user_id = str(getattr(current_user, 'id', 'anonymous'))
            except Exception:
                # No user loader configured for this app
                pass

        timestamp = datetime.now(timezone.utc).isoformat()
        self.logger.debug(
            f"[{category}] {message} | user={user_id} path={request_path} at={timestamp} | Extra: {extra_data or {}}"
        )


_debug_manager = None


def get_debug_manager() -> DebugManager:
    """Get the global debug manager instance."""
    global _debug_manager
    if _debug_manager is None:
        _debug_manager = DebugManager()
    return _debug_manager


def debug_log(message: str, category: str = "GENERAL", extra_data: Optional[Dict[str, Any]] = None):
    """Convenience function for debug logging."""
    get_debug_manager().log_debug(message, category, extra_data)


def debug_layout_build(layout, template_name, many_forms, operation="BUILD"):
    """Debug output for a composite layout render."""
    debug_log(f"[{operation}] {type(layout).__name__} -> {template_name}", "LAYOUT")

    if many_forms:
        for key, built in many_forms.items():
            debug_log(f"[{operation}] {key}: {len(built)} child layout(s)", "LAYOUT")
    else:
        debug_log(f"[{operation}] No visible child layouts", "LAYOUT")


def debug_async_request(screen, method, slug, found, operation="ASYNC"):
    """Debug output for an async fragment request."""
    debug_log(
        f"[{operation}] {type(screen).__name__}.{method} slug={slug}",
        "ASYNC",
        {'layout_found': found},
    )


def debug_slug_lookup(layout, slug, operation="FIND"):
    """Debug output when a slug lookup reaches its layout."""
    debug_log(f"[{operation}] {type(layout).__name__} matches slug={slug}", "SLUG")
