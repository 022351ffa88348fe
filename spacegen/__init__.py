"""Space builder - AI workspace generation service."""
