import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class TableExtendedConfig(AppConfig):
    name = 'table_extended'
    verbose_name = 'Table Block Extended'

    shortcodes = None

    def ready(self):
        """Build the shortcode registry and announce that the app is loaded."""
        from .conf import get_table_extended_config
        from .shortcodes import ShortcodeRegistry
        from .signals import table_extended_loaded

        self.shortcodes = ShortcodeRegistry.from_config(get_table_extended_config())
        logger.info(
            f"Table Block Extended ready with shortcodes: {', '.join(self.shortcodes.tags)}"
        )

        table_extended_loaded.send(sender=self.__class__, registry=self.shortcodes)
