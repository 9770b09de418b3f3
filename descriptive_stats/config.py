import os

DEFAULT_PRECISION = os.getenv('STATS_DEFAULT_PRECISION', '2')
LOG_LEVEL = os.getenv('STATS_LOG_LEVEL', 'WARNING')
