"""
Fantasy football roster advisor.

Combines Sleeper league data with r/fantasyfootball chatter to rank waiver
pickups, drop candidates and sit/start alerts.
"""

__version__ = "1.0.0"
