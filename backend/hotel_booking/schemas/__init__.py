# hotel_booking/schemas/__init__.py
"""
Schema module initialization.
Exports all schema classes from submodules for convenient imports.
"""
from .auth import *
from .booking import *
from .hotel import *
from .user import *
