"""Date/time backends implementing ``DateTimePort``."""
