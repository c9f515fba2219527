"""
Error message catalog for JSON error bodies.

Messages are looked up by key in the locale named by the
``MESSAGE_LOCALE`` setting; unknown locales and keys fall back to English.
"""

from __future__ import annotations

from flask import current_app, has_app_context

DEFAULT_LOCALE = "en"

TRANSLATIONS = {
    "en": {
        "invalid_json": "invalid JSON",
        "title_required": "title is required",
        "invalid_status": "invalid status",
        "not_found": "not found",
        "internal_error": "internal server error",
    },
    "pt": {
        "invalid_json": "JSON inválido",
        "title_required": "title é obrigatório",
        "invalid_status": "status inválido",
        "not_found": "não encontrado",
        "internal_error": "erro interno do servidor",
    },
}


def current_locale() -> str:
    """Return the configured locale, or English outside an app or for unknown locales."""
    if not has_app_context():
        return DEFAULT_LOCALE
    locale = str(current_app.config.get("MESSAGE_LOCALE") or DEFAULT_LOCALE).lower()
    return locale if locale in TRANSLATIONS else DEFAULT_LOCALE


def message(key: str, locale: str | None = None) -> str:
    """Return the error text for ``key`` in the given (or configured) locale."""
    table = TRANSLATIONS.get(locale or current_locale(), TRANSLATIONS[DEFAULT_LOCALE])
    return table.get(key) or TRANSLATIONS[DEFAULT_LOCALE].get(key, key)
