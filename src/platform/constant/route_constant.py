"""Route prefixes and paths, shared by the app factory and tests."""

BOOKING_PREFIX = '/api/bookings'
EVENT_PREFIX = '/api/events'

BOOKING_CREATE = BOOKING_PREFIX
BOOKING_ACTION = f'{BOOKING_PREFIX}/action'

EVENT_LIST = EVENT_PREFIX
EVENT_CREATE = EVENT_PREFIX
EVENT_GET = f'{EVENT_PREFIX}/{{slug}}'
EVENT_SIMILAR = f'{EVENT_PREFIX}/{{slug}}/similar'
