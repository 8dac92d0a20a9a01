from prometheus_client import Counter, Gauge, Histogram


class BookingMetrics:
    """
    Event Booking Core Metrics Collector

    Tracks booking admission outcomes and backing store connection health
    """

    def __init__(self):
        # ========== Booking Admission Metrics ==========
        self.booking_requests = Counter(
            'booking_requests_total',
            'Total booking admission requests',
            ['result'],  # created/validation/duplicate/reference/temporal/infrastructure/error
        )

        self.booking_duration = Histogram(
            'booking_admission_duration_seconds',
            'Booking admission processing time',
            ['result'],
            buckets=[0.005, 0.01, 0.05, 0.1, 0.2, 0.5, 1.0, 2.0, 5.0],
        )

        # ========== Event Catalog Metrics ==========
        self.events_created = Counter('events_created_total', 'Total events created')

        # ========== Backing Store Metrics ==========
        self.db_connection_attempts = Counter(
            'db_connection_attempts_total',
            'Backing store connection establishment attempts',
            ['result'],  # result: success/failure
        )

        self.db_connection_ready = Gauge(
            'db_connection_ready', 'Whether the shared backing store connection is established'
        )

    # ========== Helper Methods ==========

    def record_booking(self, *, result: str, duration: float):
        self.booking_requests.labels(result=result).inc()
        self.booking_duration.labels(result=result).observe(duration)

    def record_event_created(self):
        self.events_created.inc()

    def record_db_connection_attempt(self, *, success: bool):
        self.db_connection_attempts.labels(result='success' if success else 'failure').inc()
        self.db_connection_ready.set(1 if success else 0)

    def record_db_connection_closed(self):
        self.db_connection_ready.set(0)


# Global metrics instance
metrics = BookingMetrics()
