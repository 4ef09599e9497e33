"""
Management command to expand shortcodes in an HTML file.
"""

import sys
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from table_extended.content import apply_postprocessors
from table_extended.shortcodes import get_shortcode_registry


class Command(BaseCommand):
    help = "Expand [wtbe_*] shortcodes in an HTML file and print the result"

    def add_arguments(self, parser):
        parser.add_argument(
            'path',
            nargs='?',
            help='HTML file to process (reads stdin when omitted or "-")',
        )
        parser.add_argument(
            '--output',
            '-o',
            type=str,
            help='Write the result to this file instead of stdout',
        )
        parser.add_argument(
            '--list',
            action='store_true',
            help='List the registered shortcodes and exit',
        )

    def handle(self, *args, **options):
        if options.get('list'):
            for shortcode in get_shortcode_registry():
                self.stdout.write(f"[{shortcode.tag}] {shortcode.description}")
            return

        path = options.get('path')
        if not path or path == '-':
            html = sys.stdin.read()
        else:
            source = Path(path)
            if not source.is_file():
                raise CommandError(f"File '{path}' not found")
            html = source.read_text(encoding='utf-8')

        result = apply_postprocessors(html, {})

        output = options.get('output')
        if output:
            Path(output).write_text(result, encoding='utf-8')
            self.stdout.write(self.style.SUCCESS(f"✓ Wrote {output}"))
        else:
            self.stdout.write(result, ending='')
