"""One-shot message channel carried across a redirect.

Messages are queued under the endpoint name of the page the client is redirected
to (e.g. ``admin.potion_index``) and removed the first time that page reads them.
Endpoint names do not depend on where the application is mounted.
"""
import logging
from typing import Dict, List

from flask import session

SESSION_KEY = '_flash_channel'

logger = logging.getLogger(__name__)


class FlashChannel:
    """Flash messages stored in the Flask session, keyed by target endpoint."""

    def __init__(self, session_key: str = SESSION_KEY):
        self.session_key = session_key

    def _queues(self) -> Dict[str, List[dict]]:
        return session.get(self.session_key, {})

    def push(self, target: str, message: str, category: str = 'success') -> None:
        """Queue ``message`` for the next rendering of the ``target`` endpoint."""
        queues = self._queues()
        queues.setdefault(target, []).append({'category': category, 'message': message})
        session[self.session_key] = queues
        logger.debug('flash queued for %s: %s', target, message)

    def consume(self, target: str) -> List[dict]:
        """Return and forget every message queued for ``target``."""
        queues = self._queues()
        messages = queues.pop(target, [])
        if messages:
            session[self.session_key] = queues
        return messages

    def peek(self, target: str) -> List[dict]:
        return list(self._queues().get(target, []))


flash_channel = FlashChannel()
