"""Unit converter web service."""
import os

__version__ = '0.1.0'

PACKAGE_DIR = os.path.abspath(os.path.dirname(__file__))
TEMPLATE_DIR = os.path.join(PACKAGE_DIR, 'templates')
STATIC_DIR = os.path.join(PACKAGE_DIR, 'static')
