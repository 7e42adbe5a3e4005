"""Where is the URL shortener running?

The deployment stage comes from `APP_ENV`. An unset `APP_ENV` means a
developer machine, so `app_env()` reports `'local'` and `running_locally()`
agrees with it. The SAM CLI additionally exports `AWS_SAM_LOCAL=true` inside
`sam local start-api` containers, whatever `APP_ENV` says.

Functions:
    app_env() -> str
        Lower-cased deployment stage, `'local'` when unset.
    running_locally() -> bool
        True on a developer machine or inside SAM CLI.

Example:
    >>> os.environ['APP_ENV'] = 'prod'
    >>> app_env(), running_locally()
    ('prod', False)
    >>> os.environ['AWS_SAM_LOCAL'] = 'true'
    >>> running_locally()
    True
"""

import os

from shortlink.constants import ENV


def app_env() -> str:
    return os.getenv(ENV.App.APP_ENV, 'local').lower()


def running_locally() -> bool:
    """Decide whether unexpected handler errors should surface as tracebacks

    Returns:
        bool: True for APP_ENV=local (or unset) and under `sam local`.
    """
    return app_env() == 'local' or os.getenv(ENV.App.AWS_SAM_LOCAL) == 'true'
