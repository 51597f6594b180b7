"""
chicon: change or remove the thumbnail icons of files from the command line.
"""

__version__ = "0.3.0"

PROG_NAME = "chicon"
