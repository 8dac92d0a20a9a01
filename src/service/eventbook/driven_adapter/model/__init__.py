"""
Database Models

Import all models here to ensure they are registered with SQLAlchemy
"""

from src.service.eventbook.driven_adapter.model.booking_model import BookingModel
from src.service.eventbook.driven_adapter.model.event_model import EventModel

__all__ = [
    'BookingModel',
    'EventModel',
]
