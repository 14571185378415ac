"""
RepairTrack Service.

Repair job tracking for small shops, with WhatsApp updates to customers.
"""

__version__ = "0.1.0"
__description__ = "RepairTrack Service"
