"""
Service context extraction for logging.

Identifies the test process (worker, environment, pid) so that log lines
produced by parallel pytest workers can be told apart.
"""

import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'fixture_context')
    deploy_env = os.getenv('APP_ENV', 'test')

    # pytest-xdist exposes the worker id (gw0, gw1, ...)
    worker_id = os.getenv('PYTEST_XDIST_WORKER')
    task_id = worker_id if worker_id else str(os.getpid())

    return f'{service_name}@{deploy_env}:{task_id}'
