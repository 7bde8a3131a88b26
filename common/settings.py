"""Shared application settings read from environment variables."""

import datetime
import os

DOMAIN: str = os.environ.get('DOMAIN', '.melble.azzola.dev')
HOME_URL: str = 'https://' + DOMAIN[1:]

LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO')

DATA_DIR: str = os.environ.get('DATA_DIR', 'data')
DATABASE_URL: str = os.environ.get(
    'MELBLE_DATABASE_URL', f'sqlite:///{DATA_DIR}/melble.db'
)

# Day keys are calendar days in this zone, whatever the server's own clock says.
TIMEZONE: str = os.environ.get('MELBLE_TIMEZONE', 'Australia/Melbourne')
LAUNCH_DATE: datetime.date = datetime.date.fromisoformat(
    os.environ.get('MELBLE_LAUNCH_DATE', '2022-03-21')
)

SITE_URL: str = os.environ.get('MELBLE_SITE_URL', 'https://melble.azzola.dev')
