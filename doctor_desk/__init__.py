"""
Doctor Desk API

A FastAPI backend for a clinic scheduling tool: doctor login,
patient records and appointment booking.
"""

__version__ = "1.0.0"
