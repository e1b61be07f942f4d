import os


class Config:
    """Base configuration class."""

    # Serial port settings
    VALID_PORT_SPEEDS = (4800, 38400)
    PORT_SPEED = int(os.environ.get('NMEADUMP_PORT_SPEED', 0))  # 0 means "not given"
    SERIAL_TIMEOUT = float(os.environ['NMEADUMP_SERIAL_TIMEOUT']) if os.environ.get('NMEADUMP_SERIAL_TIMEOUT') else None

    # Input settings
    COMMENT_PREFIX = os.environ.get('NMEADUMP_COMMENT_PREFIX', '#')
    FILE_ENCODING = os.environ.get('NMEADUMP_FILE_ENCODING', 'ascii')

    # Output settings
    USE_MARKERS = os.environ.get('NMEADUMP_USE_MARKERS', 'True').lower() == 'true'
    SHOW_STATS = os.environ.get('NMEADUMP_SHOW_STATS', 'False').lower() == 'true'


class DevelopmentConfig(Config):
    """Development configuration."""
    SHOW_STATS = True


class PlainConfig(Config):
    """Configuration for piping the dump into other tools."""
    USE_MARKERS = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'plain': PlainConfig,
    'default': Config
}
