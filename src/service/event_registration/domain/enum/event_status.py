"""
Event lifecycle status

Any status may be set to any other by an authorized actor; only `published`
events accept registrations.
"""

from enum import StrEnum


class EventStatus(StrEnum):
    DRAFT = 'draft'
    PUBLISHED = 'published'
    CANCELLED = 'cancelled'
    COMPLETED = 'completed'
