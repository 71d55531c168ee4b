"""
Core Events Module

Named lifecycle notification channels backed by django.dispatch.Signal.

Usage:
    from core.events import get_event_dispatcher

    events = get_event_dispatcher()
    events.listen('contacts.person.create.after', on_person_created)
    events.dispatch('contacts.person.create.after', person)
"""
from core.events.dispatcher import EventDispatcher, get_event_dispatcher

__all__ = [
    'EventDispatcher',
    'get_event_dispatcher',
]
