import logging

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError

from apps.core.config import parse_bind_addr
from apps.identity.gate import get_auth_gate

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Creates the schema if needed, then serves the API with uvicorn on BIND_ADDR.'

    def add_arguments(self, parser):
        parser.add_argument(
            '--bind',
            default=None,
            help='host:port to listen on (defaults to BIND_ADDR)',
        )
        parser.add_argument(
            '--no-migrate',
            action='store_true',
            help='Skip applying migrations before serving',
        )

    def handle(self, *args, **options):
        bind_addr = options['bind'] or settings.BIND_ADDR
        try:
            host, port = parse_bind_addr(bind_addr)
        except ValueError as e:
            raise CommandError(str(e))

        if not options['no_migrate']:
            # Idempotent: only unapplied migrations run
            call_command('migrate', interactive=False, verbosity=0)

        gate = get_auth_gate()
        logger.info(f"Server running at http://{host}:{port}/")
        logger.info(f"JWT enabled: {gate.enabled}")

        import uvicorn
        uvicorn.run('config.asgi:application', host=host, port=port, log_config=None)
