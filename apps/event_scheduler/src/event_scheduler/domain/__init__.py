"""Calendar arithmetic, recurrence rules and event records."""
