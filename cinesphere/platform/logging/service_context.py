"""
Service context extraction for logging.

Identifies the running console session in log lines so that several
sessions writing to the same log directory can be told apart.
"""

import getpass
import os
from functools import lru_cache


@lru_cache(maxsize=1)
def get_service_context() -> str:
    service_name = os.getenv('SERVICE_NAME', 'cinesphere')
    deploy_env = os.getenv('DEPLOY_ENV', 'local_dev')

    try:
        user = getpass.getuser()
    except (KeyError, OSError):
        # No passwd entry / no login name (e.g. some containers)
        user = 'unknown'

    return f'{service_name}@{deploy_env}:{user}:{os.getpid()}'
