from django.core.signals import setting_changed
from django.dispatch import receiver

from .gate import get_auth_gate

GATE_SETTINGS = {'JWT_SECRET', 'READ_ONLY_WITHOUT_JWT'}


@receiver(setting_changed)
def reset_auth_gate(sender, setting, **kwargs):
    """
    Rebuild the auth gate when one of its settings changes.

    Settings only change at runtime under override_settings in tests.
    """
    if setting in GATE_SETTINGS:
        get_auth_gate.cache_clear()
