"""Core logic for the Items API: errors, logging, item service and batch processing."""
