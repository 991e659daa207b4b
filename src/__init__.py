"""
payOS Gateway - payment and payout service

A FastAPI-based service that wires two independently credentialed
payOS clients (payment collection and payouts) at startup.
"""

__version__ = "0.1.0"
