"""Signed, time limited tokens that tie an AJAX action to the visitor's session."""
from django.core import signing

from core.options import takeaway_setting

SALT = 'storefront.nonce'


def _session_key(request):
    if not request.session.session_key:
        request.session.save()
        # an empty session only gets its cookie when marked modified
        request.session.modified = True
    return request.session.session_key


def create_nonce(request, action):
    return signing.dumps({'action': action, 'session': _session_key(request)}, salt=SALT, compress=True)


def verify_nonce(request, token, action):
    if not token:
        return False
    try:
        payload = signing.loads(token, salt=SALT, max_age=takeaway_setting('NONCE_MAX_AGE'))
    except signing.BadSignature:
        return False
    return payload.get('action') == action and payload.get('session') == request.session.session_key
