"""
Service identification attached to every log line.

Format: ``<service>@<environment>:<pid>`` so that logs from several workers
of the same deployment stay distinguishable.
"""

from functools import lru_cache
import os


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'gowra-events')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')
    return f'{service_name}@{deploy_env}:{os.getpid()}'
