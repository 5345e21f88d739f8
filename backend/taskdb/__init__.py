"""
Provisioning for the to-do application's MongoDB database.
"""

__version__ = "0.1.0"
