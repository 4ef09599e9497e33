"""
Signals sent by the table_extended app.

table_extended_loaded is sent once from AppConfig.ready() after the shortcode
registry has been built. Receivers get ``registry`` as a keyword argument and
may register extra shortcodes on it.
"""

from django.dispatch import Signal

table_extended_loaded = Signal()
