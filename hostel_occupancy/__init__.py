"""Room occupancy bookkeeping for shared-occupancy hostels."""

__version__ = "0.1.0"
