import sys

import django
from django.core.checks import Error, Tags, Warning, register

from .options import is_commerce_active

MIN_PYTHON = (3, 10)
MIN_DJANGO = (4, 2)


def requirement_errors():
    """Errors for an interpreter or Django release older than supported."""
    errors = []
    if sys.version_info[:2] < MIN_PYTHON:
        errors.append(Error(
            'The takeaway system requires Python %d.%d or higher. You are running %s.'
            % (MIN_PYTHON + (sys.version.split()[0],)),
            id='takeaway.E001',
        ))
    if django.VERSION[:2] < MIN_DJANGO:
        errors.append(Error(
            'The takeaway system requires Django %d.%d or higher. You are running %s.'
            % (MIN_DJANGO + (django.get_version(),)),
            id='takeaway.E002',
        ))
    return errors


@register(Tags.compatibility)
def check_requirements(app_configs, **kwargs):
    return requirement_errors()


@register()
def check_commerce_integration(app_configs, **kwargs):
    if is_commerce_active():
        return []
    return [Warning(
        'The takeaway system requires the commerce integration to be installed and enabled.',
        hint="Add 'commerce' to INSTALLED_APPS and set TAKEAWAY['COMMERCE_ENABLED'] = True.",
        id='takeaway.W001',
    )]
