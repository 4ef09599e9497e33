# table_extended/conf.py

from django.conf import settings

# Same list WordPress returns from wp_allowed_protocols().
DEFAULT_ALLOWED_PROTOCOLS = [
    "http",
    "https",
    "ftp",
    "ftps",
    "mailto",
    "news",
    "irc",
    "irc6",
    "ircs",
    "gopher",
    "nntp",
    "feed",
    "telnet",
    "mms",
    "rtsp",
    "sms",
    "svn",
    "tel",
    "fax",
    "xmpp",
    "webcal",
    "urn",
]

DEFAULTS = {
    # Dotted paths to Shortcode definitions registered at startup
    "SHORTCODES": [
        "table_extended.shortcodes.placeholder.placeholder",
        "table_extended.shortcodes.cta.cta",
    ],
    # URL schemes esc_url() keeps
    "ALLOWED_PROTOCOLS": DEFAULT_ALLOWED_PROTOCOLS,
    # Elements whose text is never scanned for shortcodes
    "SKIP_TAGS": ["code", "pre", "script", "style", "textarea"],
    # Elements with any of these classes are never scanned either
    "SKIP_CLASSES": ["wtbe-shortcode-error"],
}


def get_table_extended_config():
    """
    Configuration for the table_extended app.

    Values from ``settings.TABLE_EXTENDED`` override the defaults key by key.
    Read on every call so settings overrides in tests take effect.
    """
    overrides = getattr(settings, "TABLE_EXTENDED", None) or {}
    config = dict(DEFAULTS)
    config.update(overrides)
    return config
