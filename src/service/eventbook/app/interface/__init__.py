from src.service.eventbook.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.eventbook.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.eventbook.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.eventbook.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.eventbook.app.interface.i_image_uploader import IImageUploader

__all__ = [
    'IBookingCommandRepo',
    'IBookingQueryRepo',
    'IEventCommandRepo',
    'IEventQueryRepo',
    'IImageUploader',
]
