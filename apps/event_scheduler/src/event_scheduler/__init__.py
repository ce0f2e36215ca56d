"""Recurring event scheduling toolkit."""
