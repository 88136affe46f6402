"""SyncN cycle calendar service."""
