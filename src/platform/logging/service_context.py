"""
Service identification bound to every log record.

Format: {service_name}@{deploy_env}:{instance}
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'event-booking')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    # Container hostname when deployed, PID for local runs
    instance = os.getenv('HOSTNAME', '')[:12] or str(os.getpid())

    return f'{service_name}@{deploy_env}:{instance}'
