"""Schengen 90/180-day compliance tracker."""
