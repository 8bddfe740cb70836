import logging

from django.core.management.base import BaseCommand, CommandError

from converter.conf import get_setting
from converter.diagnostics import convert_description, format_diagnostic
from converter.exceptions import MalformedInputError

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Convert the automaton described in an input file into a regular expression"

    def add_arguments(self, parser):
        parser.add_argument('--input', default=get_setting('INPUT_PATH'),
                            help="Automaton description file")
        parser.add_argument('--output', default=get_setting('OUTPUT_PATH'),
                            help="File receiving the expression or the diagnostic")

    def handle(self, *args, **options):
        try:
            with open(options['input'], encoding='utf-8') as f:
                text = f.read()
        except UnicodeDecodeError as e:
            logger.info("Input %s is not valid UTF-8: %s", options['input'], e)
            text = None
        except OSError as e:
            raise CommandError(f"Cannot read {options['input']}: {e}")

        if text is None:
            report = format_diagnostic(MalformedInputError("Input is not valid UTF-8"))
        else:
            report = convert_description(text)
        logger.debug("Writing report to %s", options['output'])

        try:
            with open(options['output'], 'w', encoding='utf-8') as f:
                f.write(report)
        except OSError as e:
            raise CommandError(f"Cannot write {options['output']}: {e}")

        if options['verbosity'] > 1:
            self.stdout.write(report)
