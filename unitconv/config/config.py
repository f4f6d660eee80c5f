"""Service configuration settings."""
import os

# HTTP server
HOST = os.getenv('UNITCONV_HOST', '0.0.0.0')
PORT = int(os.getenv('UNITCONV_PORT', '8080'))
DEBUG = os.getenv('UNITCONV_DEBUG', 'false').lower() == 'true'

# Logging
LOG_LEVEL = os.getenv('UNITCONV_LOG_LEVEL', 'INFO').upper()

# Page rendering
TEMPLATE_NAME = os.getenv('UNITCONV_TEMPLATE_NAME', 'index.html')

# Result formatting
SCIENTIFIC_LOWER_BOUND = 0.001  # below this magnitude use scientific notation
SCIENTIFIC_UPPER_BOUND = 1_000_000  # above this magnitude use scientific notation
SCIENTIFIC_DIGITS = 6

# Decimal places used in the plain-text /convert response
PLAIN_RESULT_DECIMALS = 3

# Digits kept when cleaning float drift out of a conversion result
CONVERSION_ROUND_DIGITS = 12
